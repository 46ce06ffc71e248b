"""
Graphviz DOT export of a computational graph.

The graph is walked breadth-first from the creator of an output variable.
Variables and Functions draw ids from separate counters, so node names are
prefixed (``v<id>`` / ``f<id>``) to keep them distinct. Rendering the text
to an image is left to an external ``dot`` binary.
"""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import Union

from ._function import Function
from ._variable import Variable

logger = logging.getLogger(__name__)


def _escape_label(text: str) -> str:
    """
    Escape backslashes and double quotes for a quoted DOT string.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _variable_to_dot(v: Variable, verbose: bool) -> str:
    label = v.name
    if verbose:
        label = f"{label}: {v.shape} {v.data_type}"
    return f'v{v.id} [label="{_escape_label(label)}", color=orange, style=filled]\n'


def _function_to_dot(f: Function) -> str:
    txt = f'f{f.id} [label="{_escape_label(f.name)}", color=lightblue, style=filled, shape=box]\n'
    for x in f.inputs:
        txt += f"v{x.id} -> f{f.id}\n"
    for y in f.outputs:
        txt += f"f{f.id} -> v{y.id}\n"
    return txt


def get_dot_graph(output: Variable, verbose: bool = False) -> str:
    """
    Return the DOT description of the graph that produced `output`.

    Parameters
    ----------
    output : Variable
        Graph output to start the walk from.
    verbose : bool, optional
        If True, variable labels include shape and kind.

    Returns
    -------
    str
        Text of the form ``digraph g { ... }``.

    Raises
    ------
    NoCreatorError
        If `output` has no creator.
    """
    creator = output.get_creator_result()
    funcs = deque([creator])
    seen = {creator}
    parts = [_variable_to_dot(output, verbose)]

    while funcs:
        f = funcs.popleft()
        parts.append(_function_to_dot(f))
        for x in f.inputs:
            parts.append(_variable_to_dot(x, verbose))
            if x.creator is not None and x.creator not in seen:
                seen.add(x.creator)
                funcs.append(x.creator)

    return "digraph g {\n" + "".join(parts) + "}"


def write_dot_graph(
    output: Variable, path: Union[str, os.PathLike], verbose: bool = False
) -> None:
    """
    Write the DOT description of `output`'s graph to `path`.
    """
    text = get_dot_graph(output, verbose)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)
    logger.debug("wrote dot graph for %r to %s", output.name, path)
