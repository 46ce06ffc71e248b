import unittest

import numpy as np

from src.keygrad.domain._errors import NotImplementedTypeError
from src.keygrad.domain.types._data_type import DataType
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import exp, mul, square
from src.keygrad.infrastructure.utils import (
    accuracy,
    gradient_check,
    numerical_diff,
    numerical_grad,
)


class TestNumericalDiff(unittest.TestCase):
    def test_square(self) -> None:
        x = Variable(np.array([1.0, 2.0, 3.0]))
        d = numerical_diff(square, x)
        np.testing.assert_allclose(d.data.to_numpy(), [2.0, 4.0, 6.0], rtol=1e-6)
        self.assertIsNone(d.creator)

    def test_does_not_record(self) -> None:
        x = Variable(np.array(1.0))
        calls = []

        def f(v: Variable) -> Variable:
            y = exp(v)
            calls.append(y.creator)
            return y

        numerical_diff(f, x)
        self.assertEqual(calls, [None, None])

    def test_integer_input_rejected(self) -> None:
        x = Variable(VariableData([1, 2], DataType.I32))
        with self.assertRaises(NotImplementedTypeError):
            numerical_diff(square, x)
        with self.assertRaises(NotImplementedTypeError):
            numerical_grad(square, x)


class TestNumericalGrad(unittest.TestCase):
    def test_non_elementwise_function(self) -> None:
        x = Variable(np.array([[1.0, 2.0], [3.0, 4.0]]))
        w = Variable(np.array([[0.5, -1.0], [2.0, 0.0]]))
        g = numerical_grad(lambda v: mul(v, w).sum(), x)
        np.testing.assert_allclose(g, w.data.to_numpy(), rtol=1e-6, atol=1e-8)

    def test_input_left_unchanged(self) -> None:
        x = Variable(np.array([1.0, 2.0]))
        numerical_grad(square, x)
        np.testing.assert_array_equal(x.data.to_numpy(), [1.0, 2.0])


class TestGradientCheck(unittest.TestCase):
    def test_passes_for_correct_gradient(self) -> None:
        x = Variable(np.random.default_rng(0).normal(size=(3, 2)))
        self.assertTrue(gradient_check(lambda v: exp(square(v)), x))

    def test_replaces_stale_gradient(self) -> None:
        x = Variable(np.array([1.0, -2.0]))
        x.set_grad(Variable(np.array([100.0, 100.0])))
        self.assertTrue(gradient_check(square, x))
        np.testing.assert_allclose(x.grad.data.to_numpy(), [2.0, -4.0])


class TestAccuracy(unittest.TestCase):
    def test_fraction_of_hits(self) -> None:
        y = Variable(np.array([[0.1, 0.9], [0.8, 0.2], [0.3, 0.7], [0.6, 0.4]]))
        t = Variable(VariableData([1, 0, 0, 1], DataType.USIZE))
        self.assertAlmostEqual(accuracy(y, t), 0.5)


if __name__ == "__main__":
    unittest.main()
