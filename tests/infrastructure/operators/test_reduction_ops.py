import unittest

import numpy as np

from src.keygrad.domain.types._data_type import DataType
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import (
    mean,
    mul,
    sum,
    sum_all,
    sum_axis,
    sum_keepdims,
)
from src.keygrad.infrastructure.utils import gradient_check


def rand(*shape: int, seed: int = 0) -> Variable:
    return Variable(np.random.default_rng(seed).normal(size=shape))


class TestSum(unittest.TestCase):
    def test_forward_variants(self) -> None:
        x = Variable(VariableData.arange((2, 3, 4)))
        arr = np.arange(24.0).reshape(2, 3, 4)
        np.testing.assert_allclose(sum_all(x).data.item(), arr.sum())
        np.testing.assert_allclose(sum_axis(x, 1).data.to_numpy(), arr.sum(axis=1))
        np.testing.assert_allclose(
            sum_keepdims(x, [0, 2]).data.to_numpy(), arr.sum(axis=(0, 2), keepdims=True)
        )

    def test_backward_without_keepdims(self) -> None:
        x = rand(2, 3, 4)
        w = rand(3, seed=1)
        mul(sum(x, [0, 2]), w).backward()
        expected = np.broadcast_to(w.data.to_numpy().reshape(1, 3, 1), (2, 3, 4))
        np.testing.assert_allclose(x.grad.data.to_numpy(), expected)

    def test_backward_with_keepdims(self) -> None:
        x = rand(2, 3)
        w = rand(2, 1, seed=1)
        mul(sum(x, 1, keepdims=True), w).backward()
        np.testing.assert_allclose(
            x.grad.data.to_numpy(), np.broadcast_to(w.data.to_numpy(), (2, 3))
        )

    def test_sum_of_scalar(self) -> None:
        x = Variable(np.array(4.0))
        y = sum(x)
        y.backward()
        self.assertEqual(x.grad.shape, ())
        self.assertEqual(x.grad.data.item(), 1.0)

    def test_numerical_agreement(self) -> None:
        for axis, keepdims in ((None, False), ([1], False), ([0, 2], True), (-1, True)):
            with self.subTest(axis=axis, keepdims=keepdims):
                def f(v, axis=axis, keepdims=keepdims):
                    s = sum(mul(v, v), axis, keepdims)
                    return mul(s, s)

                self.assertTrue(gradient_check(f, rand(2, 3, 2)))


class TestMean(unittest.TestCase):
    def test_mean_value_and_gradient(self) -> None:
        x = Variable(np.array([[1.0, 2.0], [3.0, 6.0]]))
        y = mean(x, [1])
        np.testing.assert_allclose(y.data.to_numpy(), [1.5, 4.5])
        y.backward()
        np.testing.assert_allclose(x.grad.data.to_numpy(), np.full((2, 2), 0.5))

    def test_mean_of_integers_truncates(self) -> None:
        x = Variable(VariableData([1, 2, 4], DataType.I64))
        self.assertEqual(mean(x).data.item(), 2)


if __name__ == "__main__":
    unittest.main()
