"""
Numerical differentiation helpers.

These utilities compute central-difference derivatives with graph recording
disabled and compare them against the gradients produced by backward. They
are used by the test suite and are available to callers validating custom
operators.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from ...domain._errors import NotImplementedTypeError
from ...domain.types._data_type import FLOATS
from .._config import no_grad
from .._variable import Variable
from ..data import VariableData
from ..operators import sum

logger = logging.getLogger(__name__)


def _require_float(x: Variable, op: str) -> None:
    if x.data_type not in FLOATS:
        raise NotImplementedTypeError(op, x.data_type)


def numerical_diff(
    f: Callable[[Variable], Variable], x: Variable, eps: float = 1e-4
) -> Variable:
    """
    Central difference ``(f(x + eps) - f(x - eps)) / (2 * eps)``.

    The whole input is shifted at once, so the result is the derivative only
    for elementwise `f`.

    Returns
    -------
    Variable
        A detached variable holding the estimate.
    """
    _require_float(x, "numerical_diff")
    with no_grad():
        y0 = f(Variable(x.data.scalar_add(-eps)))
        y1 = f(Variable(x.data.scalar_add(eps)))
    return Variable(y1.data.sub(y0.data).scalar_mul(1.0 / (2.0 * eps)))


def numerical_grad(
    f: Callable[[Variable], Variable], x: Variable, eps: float = 1e-4
) -> np.ndarray:
    """
    Per-element central difference of ``sum(f(x))`` with respect to `x`.

    Returns
    -------
    np.ndarray
        Array of the same shape as `x`.
    """
    _require_float(x, "numerical_grad")
    base = x.data.to_numpy()
    grad = np.zeros_like(base)
    kind = x.data_type

    def evaluate(arr: np.ndarray) -> float:
        y = f(Variable(VariableData(arr, kind)))
        return float(y.data.sum().item())

    with no_grad():
        for idx in np.ndindex(base.shape):
            orig = base[idx]
            base[idx] = orig + eps
            hi = evaluate(base)
            base[idx] = orig - eps
            lo = evaluate(base)
            base[idx] = orig
            grad[idx] = (hi - lo) / (2.0 * eps)
    return grad


def gradient_check(
    f: Callable[[Variable], Variable],
    x: Variable,
    eps: float = 1e-4,
    rtol: float = 1e-4,
    atol: float = 1e-5,
) -> bool:
    """
    Compare the backward gradient of ``sum(f(x))`` against `numerical_grad`.

    `x` must be a leaf; any gradient it holds is cleared first and the
    computed gradient is left in place afterwards.

    Returns
    -------
    bool
        True when every element agrees within ``rtol`` / ``atol``.
    """
    x.clear_grad()
    y = f(x)
    if y.shape != ():
        y = sum(y)
    y.backward()
    analytic = x.grad_result().data.to_numpy()
    numeric = numerical_grad(f, x, eps)
    ok = bool(np.allclose(analytic, numeric, rtol=rtol, atol=atol))
    if not ok:
        logger.debug(
            "gradient_check mismatch: max abs diff %g",
            float(np.max(np.abs(analytic - numeric))),
        )
    return ok


def accuracy(y: Variable, t: Variable) -> float:
    """
    Fraction of rows of `y` whose argmax equals the label in `t`.
    """
    pred = y.data.argmax_with_axis(1).to_index_list()
    labels = t.data.to_index_list()
    hits = 0
    for p, label in zip(pred, labels):
        if p == label:
            hits += 1
    return hits / len(pred) if pred else 0.0
