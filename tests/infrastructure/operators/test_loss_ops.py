import unittest

import numpy as np

from src.keygrad.domain._errors import DataDimensionError, NotCollectTypeError
from src.keygrad.domain.types._data_type import DataType
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import (
    linear,
    mean_squared_error,
    softmax,
    softmax_cross_entropy,
)
from src.keygrad.infrastructure.utils import gradient_check


def rand(*shape: int, seed: int = 0) -> Variable:
    return Variable(np.random.default_rng(seed).normal(size=shape))


class TestMeanSquaredError(unittest.TestCase):
    def test_value_and_gradient(self) -> None:
        x0 = Variable(np.array([[1.0], [2.0], [4.0]]))
        x1 = Variable(np.array([[0.0], [2.0], [1.0]]))
        y = mean_squared_error(x0, x1)
        self.assertAlmostEqual(y.data.item(), 10.0 / 3.0)
        y.backward()
        np.testing.assert_allclose(x0.grad.data.to_numpy(), [[2.0 / 3.0], [0.0], [2.0]])
        np.testing.assert_allclose(x1.grad.data.to_numpy(), -x0.grad.data.to_numpy())

    def test_numerical_agreement(self) -> None:
        t = rand(4, 2, seed=1)
        self.assertTrue(gradient_check(lambda v: mean_squared_error(v, t), rand(4, 2)))

    def test_simple_regression_converges(self) -> None:
        rng = np.random.default_rng(0)
        x = Variable(rng.uniform(size=(50, 1)))
        t = Variable(2.0 * x.data.to_numpy() + 5.0)
        w = Variable(np.zeros((1, 1)))
        b = Variable(np.zeros(1))
        for _ in range(500):
            loss = mean_squared_error(linear(x, w, b), t)
            w.clear_grad()
            b.clear_grad()
            loss.backward()
            w.set_data(w.data.sub(w.grad.data.scalar_mul(0.2)))
            b.set_data(b.data.sub(b.grad.data.scalar_mul(0.2)))
        self.assertLess(loss.data.item(), 1e-3)


class TestSoftmaxCrossEntropy(unittest.TestCase):
    def setUp(self) -> None:
        self.t = Variable(VariableData([2, 0, 1], DataType.USIZE))

    def test_value(self) -> None:
        x = rand(3, 4)
        loss = softmax_cross_entropy(x, self.t)
        p = softmax(x).data.to_numpy()
        expected = -np.mean(np.log(p[[0, 1, 2], [2, 0, 1]]))
        self.assertAlmostEqual(loss.data.item(), expected)

    def test_gradient(self) -> None:
        x = rand(3, 4)
        softmax_cross_entropy(x, self.t).backward()
        p = softmax(x).data.to_numpy()
        onehot = np.eye(4)[[2, 0, 1]]
        np.testing.assert_allclose(x.grad.data.to_numpy(), (p - onehot) / 3.0)
        np.testing.assert_array_equal(self.t.grad.data.to_numpy(), [0, 0, 0])

    def test_numerical_agreement(self) -> None:
        self.assertTrue(gradient_check(lambda v: softmax_cross_entropy(v, self.t), rand(3, 4)))

    def test_large_logits_are_stable(self) -> None:
        x = Variable(np.array([[1000.0, 0.0], [0.0, 1000.0]]))
        t = Variable(VariableData([0, 1], DataType.I64))
        self.assertAlmostEqual(softmax_cross_entropy(x, t).data.item(), 0.0)

    def test_rejects_bad_inputs(self) -> None:
        with self.assertRaises(DataDimensionError):
            softmax_cross_entropy(rand(4), self.t)
        with self.assertRaises(NotCollectTypeError):
            softmax_cross_entropy(rand(3, 4), Variable(np.array([2.0, 0.0, 1.0])))


if __name__ == "__main__":
    unittest.main()
