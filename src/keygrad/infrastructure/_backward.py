"""
Generation-ordered backward scheduler.

Functions are processed in strictly decreasing generation. When a Function F
is popped, every Function that could still add gradient to F's outputs lies
further along the forward chain and so has a larger generation; it has
already been processed. Each output gradient is therefore complete by the
time F consumes it, which is what makes accumulation correct for
diamond-shaped graphs.

Functions sharing a generation are popped in the order they were enqueued,
so a pass over a given graph always visits nodes in the same order.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

from ._config import using_config

if TYPE_CHECKING:
    from ._function import Function
    from ._variable import Variable

logger = logging.getLogger(__name__)


def run_backward(
    root: Variable, retain_grad: bool = False, create_graph: bool = False
) -> None:
    """
    Back-propagate from `root`, whose gradient must already be seeded.

    Parameters
    ----------
    root : Variable
        The variable on which backward was requested.
    retain_grad : bool, optional
        If True, every intermediate gradient is kept. Otherwise the
        gradients of each processed Function's outputs are cleared once
        consumed (the gradient of `root` itself is kept).
    create_graph : bool, optional
        If True, the backward computation is recorded, so the produced
        gradients are differentiable. Otherwise it runs under no-grad.

    Raises
    ------
    NoCreatorError
        If `root` has no creator.
    """
    from .operators import add

    creator = root.get_creator_result()

    heap: list[tuple[int, int, Function]] = []
    seen: set[Function] = set()
    counter = itertools.count()

    def push(f: Function) -> None:
        if f in seen:
            return
        seen.add(f)
        heapq.heappush(heap, (-f.generation, next(counter), f))

    push(creator)
    logger.debug(
        "backward start: root=%r retain_grad=%s create_graph=%s",
        root.name,
        retain_grad,
        create_graph,
    )

    processed = 0
    with using_config("enable_backprop", create_graph):
        while heap:
            _, _, f = heapq.heappop(heap)
            ys = f.outputs
            gys = [y.grad_result() for y in ys]
            gxs = f.backward(gys)

            for x, gx in zip(f.inputs, gxs):
                if x.grad is None:
                    x.set_grad(gx)
                else:
                    x.set_grad(add(x.grad, gx))
                if x.creator is not None:
                    push(x.creator)

            if not retain_grad:
                for y in ys:
                    if y is not root:
                        y.clear_grad()
            processed += 1

    logger.debug("backward done: root=%r functions=%d", root.name, processed)
