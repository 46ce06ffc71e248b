import unittest

import numpy as np

from src.keygrad.domain._errors import DataShapeError, InvalidArgumentError
from src.keygrad.domain.types._data_type import DataType
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import (
    add,
    div,
    mul,
    neg,
    pow,
    square,
    sub,
)
from src.keygrad.infrastructure.utils import gradient_check


def rand(*shape: int, seed: int = 0) -> Variable:
    return Variable(np.random.default_rng(seed).uniform(0.5, 1.5, size=shape))


class TestArithmeticForward(unittest.TestCase):
    def test_broadcasting(self) -> None:
        a = Variable(np.array([[1.0], [2.0]]))
        b = Variable(np.array([10.0, 20.0, 30.0]))
        y = add(a, b)
        self.assertEqual(y.shape, (2, 3))
        np.testing.assert_allclose(y.data.to_numpy(), [[11, 21, 31], [12, 22, 32]])

    def test_incompatible_shapes(self) -> None:
        with self.assertRaises(DataShapeError):
            add(Variable(np.zeros(2)), Variable(np.zeros(3)))

    def test_integer_division_truncates(self) -> None:
        a = Variable(VariableData([-7, 7], DataType.I32))
        b = Variable(VariableData([2, 2], DataType.I32))
        np.testing.assert_array_equal(div(a, b).data.to_numpy(), [-3, 3])

    def test_integer_pow(self) -> None:
        x = Variable(VariableData([2, 4], DataType.I64))
        with self.assertRaises(InvalidArgumentError):
            pow(x, -1)
        y = pow(x, 0)
        np.testing.assert_array_equal(y.data.to_numpy(), [1, 1])
        y.backward()
        np.testing.assert_array_equal(x.grad.data.to_numpy(), [0, 0])


class TestArithmeticBackward(unittest.TestCase):
    def test_add_sub_mul_div_values(self) -> None:
        x0 = Variable(np.array(3.0))
        x1 = Variable(np.array(2.0))
        div(mul(add(x0, x1), sub(x0, x1)), x1).backward()
        # y = (x0^2 - x1^2) / x1
        self.assertAlmostEqual(x0.grad.data.item(), 3.0)
        self.assertAlmostEqual(x1.grad.data.item(), -(9.0 / 4.0) - 1.0)

    def test_broadcast_gradients_are_reduced(self) -> None:
        a = Variable(np.ones((2, 3)))
        b = Variable(np.array([1.0, 2.0, 3.0]))
        c = Variable(np.array([[2.0], [4.0]]))
        mul(add(a, b), c).backward()
        self.assertEqual(b.grad.shape, (3,))
        self.assertEqual(c.grad.shape, (2, 1))
        np.testing.assert_allclose(b.grad.data.to_numpy(), [6.0, 6.0, 6.0])
        np.testing.assert_allclose(c.grad.data.to_numpy(), [[9.0], [9.0]])

    def test_neg(self) -> None:
        x = Variable(np.array([1.0, 2.0]))
        neg(x).backward()
        np.testing.assert_allclose(x.grad.data.to_numpy(), [-1.0, -1.0])

    def test_numerical_agreement(self) -> None:
        other = rand(2, 3, seed=1)
        row = rand(3, seed=2)
        cases = [
            lambda v: add(v, other),
            lambda v: sub(row, v),
            lambda v: mul(v, row),
            lambda v: div(v, other),
            lambda v: div(row, v),
            lambda v: pow(v, 3),
            lambda v: pow(v, 0.5),
            square,
            neg,
        ]
        for i, f in enumerate(cases):
            with self.subTest(case=i):
                self.assertTrue(gradient_check(f, rand(2, 3)))


if __name__ == "__main__":
    unittest.main()
