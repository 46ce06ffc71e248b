import unittest
import warnings

import numpy as np

from src.keygrad.domain._errors import NotImplementedTypeError
from src.keygrad.domain.types._data_type import DataType
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import cos, exp, log, sin, tanh
from src.keygrad.infrastructure.utils import gradient_check


class TestTranscendental(unittest.TestCase):
    def test_known_derivatives(self) -> None:
        x = Variable(np.array(0.3))
        for f, expected in (
            (exp, np.exp(0.3)),
            (log, 1.0 / 0.3),
            (sin, np.cos(0.3)),
            (cos, -np.sin(0.3)),
            (tanh, 1.0 - np.tanh(0.3) ** 2),
        ):
            with self.subTest(op=f.__name__):
                x.clear_grad()
                f(x).backward()
                self.assertAlmostEqual(x.grad.data.item(), expected)

    def test_numerical_agreement(self) -> None:
        for f in (exp, log, sin, cos, tanh):
            with self.subTest(op=f.__name__):
                x = Variable(np.random.default_rng(3).uniform(0.2, 2.0, size=(3, 2)))
                self.assertTrue(gradient_check(f, x))

    def test_float32_kind_is_kept(self) -> None:
        x = Variable(VariableData([0.5, 1.0], DataType.F32))
        y = tanh(x)
        self.assertIs(y.data_type, DataType.F32)
        y.backward()
        self.assertIs(x.grad.data_type, DataType.F32)

    def test_integer_input_rejected(self) -> None:
        with self.assertRaises(NotImplementedTypeError):
            exp(Variable(VariableData([1, 2], DataType.I64)))

    def test_log_of_zero_warns(self) -> None:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            log(Variable(np.array([0.0])))
        self.assertTrue(any(issubclass(w.category, RuntimeWarning) for w in caught))

    def test_second_derivative_of_sin(self) -> None:
        x = Variable(np.array(0.7))
        sin(x).backward_create_graph()
        gx = x.grad
        x.clear_grad()
        gx.backward()
        self.assertAlmostEqual(x.grad.data.item(), -np.sin(0.7))


if __name__ == "__main__":
    unittest.main()
