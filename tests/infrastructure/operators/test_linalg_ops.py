import unittest

import numpy as np

from src.keygrad.domain._errors import (
    DataDimensionError,
    DataShapeError,
    OutOfRangeVariableCountError,
)
from src.keygrad.infrastructure._function import Function
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.operators import Linear, linear, matmul
from src.keygrad.infrastructure.utils import gradient_check


def rand(*shape: int, seed: int = 0) -> Variable:
    return Variable(np.random.default_rng(seed).normal(size=shape))


class TestMatMul(unittest.TestCase):
    def test_gradients(self) -> None:
        x = rand(2, 3)
        w = rand(3, 4, seed=1)
        matmul(x, w).backward()
        ones = np.ones((2, 4))
        np.testing.assert_allclose(x.grad.data.to_numpy(), ones @ w.data.to_numpy().T)
        np.testing.assert_allclose(w.grad.data.to_numpy(), x.data.to_numpy().T @ ones)

    def test_errors(self) -> None:
        with self.assertRaises(DataShapeError):
            matmul(rand(2, 3), rand(2, 3))
        with self.assertRaises(DataDimensionError):
            matmul(rand(3), rand(3, 2))

    def test_numerical_agreement(self) -> None:
        w = rand(3, 2, seed=2)
        self.assertTrue(gradient_check(lambda v: matmul(v, w), rand(4, 3)))
        x = rand(4, 3, seed=3)
        self.assertTrue(gradient_check(lambda v: matmul(x, v), rand(3, 2)))


class TestLinear(unittest.TestCase):
    def test_matches_matmul_plus_bias(self) -> None:
        x, w, b = rand(5, 3), rand(3, 2, seed=1), rand(2, seed=2)
        y = linear(x, w, b)
        expected = x.data.to_numpy() @ w.data.to_numpy() + b.data.to_numpy()
        np.testing.assert_allclose(y.data.to_numpy(), expected)
        y.backward()
        np.testing.assert_allclose(b.grad.data.to_numpy(), [5.0, 5.0])
        self.assertEqual(w.grad.shape, (3, 2))

    def test_without_bias(self) -> None:
        x, w = rand(2, 3), rand(3, 2, seed=1)
        y = linear(x, w)
        self.assertEqual(len(y.creator.inputs), 2)
        np.testing.assert_allclose(y.data.to_numpy(), matmul(x, w).data.to_numpy())

    def test_arity(self) -> None:
        with self.assertRaises(OutOfRangeVariableCountError):
            Function(Linear()).forward([rand(2, 2)])

    def test_numerical_agreement(self) -> None:
        x, w = rand(4, 3), rand(3, 2, seed=1)
        self.assertTrue(gradient_check(lambda v: linear(x, w, v), rand(2, seed=2)))
        self.assertTrue(gradient_check(lambda v: linear(v, w, rand(2, seed=2)), rand(4, 3)))


if __name__ == "__main__":
    unittest.main()
