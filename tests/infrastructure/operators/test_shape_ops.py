import unittest

import numpy as np

from src.keygrad.domain._errors import DataShapeError, InvalidArgumentError
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.data import VariableData
from src.keygrad.infrastructure.operators import (
    broadcast_to,
    mul,
    reshape,
    sum_to,
    transpose,
)
from src.keygrad.infrastructure.utils import gradient_check


def rand(*shape: int, seed: int = 0) -> Variable:
    return Variable(np.random.default_rng(seed).normal(size=shape))


class TestReshapeTranspose(unittest.TestCase):
    def test_reshape_gradient_has_input_shape(self) -> None:
        x = rand(2, 3)
        reshape(x, (6,)).backward()
        self.assertEqual(x.grad.shape, (2, 3))

    def test_reshape_to_same_shape_records_new_node(self) -> None:
        x = Variable(np.array([[1.0, 2.0, 3.0]]), name="x")
        y = reshape(x, (1, 3))
        self.assertIsNot(y, x)
        self.assertEqual(y.creator.name, "Reshape")
        y.set_name("y")
        self.assertEqual(x.name, "x")
        y.backward()
        np.testing.assert_allclose(x.grad.data.to_numpy(), [[1.0, 1.0, 1.0]])

    def test_reshape_size_mismatch(self) -> None:
        with self.assertRaises(DataShapeError):
            reshape(rand(2, 3), (4,))

    def test_transpose_permutation_gradient(self) -> None:
        x = rand(2, 3, 4)
        w = rand(4, 2, 3, seed=1)
        y = mul(transpose(x, (2, 0, 1)), w)
        self.assertEqual(y.shape, (4, 2, 3))
        y.backward()
        np.testing.assert_allclose(
            x.grad.data.to_numpy(), np.transpose(w.data.to_numpy(), (1, 2, 0))
        )

    def test_transpose_invalid_axes(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            transpose(rand(2, 3), (0, 2))

    def test_numerical_agreement(self) -> None:
        w = rand(3, 2, seed=4)
        self.assertTrue(gradient_check(lambda v: mul(transpose(v), w), rand(2, 3)))
        self.assertTrue(gradient_check(lambda v: mul(reshape(v, (3, 2)), w), rand(2, 3)))


class TestBroadcastSumTo(unittest.TestCase):
    def test_broadcast_gradient_is_sum_to(self) -> None:
        x = rand(1, 3)
        broadcast_to(x, (4, 2, 3)).backward()
        np.testing.assert_allclose(x.grad.data.to_numpy(), np.full((1, 3), 8.0))

    def test_sum_to_gradient_is_broadcast(self) -> None:
        x = rand(2, 3)
        y = sum_to(x, (1, 3))
        np.testing.assert_allclose(
            y.data.to_numpy(), x.data.to_numpy().sum(axis=0, keepdims=True)
        )
        y.backward()
        np.testing.assert_allclose(x.grad.data.to_numpy(), np.ones((2, 3)))

    def test_sum_to_drops_leading_axes(self) -> None:
        x = Variable(VariableData.ones((2, 3, 4)))
        y = sum_to(x, (4,))
        np.testing.assert_allclose(y.data.to_numpy(), [6.0, 6.0, 6.0, 6.0])

    def test_same_shape_records_new_node(self) -> None:
        for op, name in ((broadcast_to, "BroadcastTo"), (sum_to, "SumTo")):
            with self.subTest(op=name):
                x = Variable(np.array([1.0, 2.0]), name="x")
                y = op(x, (2,))
                self.assertIsNot(y, x)
                self.assertEqual(y.creator.name, name)
                y.set_name("y")
                self.assertEqual(x.name, "x")
                y.backward()
                np.testing.assert_allclose(x.grad.data.to_numpy(), [1.0, 1.0])

    def test_incompatible_shapes(self) -> None:
        with self.assertRaises(DataShapeError):
            broadcast_to(rand(2, 3), (3, 3))
        with self.assertRaises(DataShapeError):
            sum_to(rand(2, 3), (4,))

    def test_numerical_agreement(self) -> None:
        w = rand(2, 1, 3, seed=5)
        self.assertTrue(gradient_check(lambda v: mul(broadcast_to(v, (2, 1, 3)), w), rand(1, 3)))
        u = rand(3, seed=6)
        self.assertTrue(gradient_check(lambda v: mul(sum_to(v, (3,)), u), rand(2, 3)))


if __name__ == "__main__":
    unittest.main()
