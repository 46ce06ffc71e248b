"""
Runtime configuration and the no-grad context.

Configuration is stored per thread (`threading.local`), so a no-grad scope
entered in one thread never affects graph recording in another.

The no-grad guard disables graph recording for the operators executed while
it is active. Two exit policies are supported:

- ``"restore"`` (default): the value seen on entry is restored on exit, so
  nested guards compose.
- ``"reset"``: exit unconditionally re-enables recording, so an inner guard
  re-enables recording inside an outer one.

The process-wide default is read once from the ``KEYGRAD_NO_GRAD_EXIT``
environment variable and can be overridden per thread through
``config.no_grad_exit_policy``.
"""

import contextlib
import logging
import os
import threading
import warnings
from typing import Any, Iterator, Optional

logger = logging.getLogger(__name__)

NO_GRAD_EXIT_ENV = "KEYGRAD_NO_GRAD_EXIT"
EXIT_RESTORE = "restore"
EXIT_RESET = "reset"
_EXIT_POLICIES = (EXIT_RESTORE, EXIT_RESET)


def _read_exit_policy() -> str:
    raw = os.environ.get(NO_GRAD_EXIT_ENV, EXIT_RESTORE).strip().lower()
    if raw not in _EXIT_POLICIES:
        warnings.warn(
            f"{NO_GRAD_EXIT_ENV}={raw!r} is not one of {_EXIT_POLICIES}; "
            f"falling back to {EXIT_RESTORE!r}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return EXIT_RESTORE
    return raw


_DEFAULT_EXIT_POLICY = _read_exit_policy()


class Config(threading.local):
    """
    Per-thread engine configuration.

    Attributes
    ----------
    enable_backprop : bool
        Whether `Function.forward` records graph edges. Defaults to True.
    no_grad_exit_policy : str
        ``"restore"`` or ``"reset"``; see the module docstring.
    """

    def __init__(self) -> None:
        self.enable_backprop = True
        self.no_grad_exit_policy = _DEFAULT_EXIT_POLICY


config = Config()


@contextlib.contextmanager
def using_config(name: str, value: Any) -> Iterator[None]:
    """
    Temporarily override one configuration attribute.

    The previous value is restored on every exit path, including exceptions.

    Raises
    ------
    AttributeError
        If `name` is not a configuration attribute.
    """
    if not hasattr(config, name):
        raise AttributeError(f"Unknown configuration attribute {name!r}")
    if name == "no_grad_exit_policy" and value not in _EXIT_POLICIES:
        raise ValueError(f"no_grad_exit_policy must be one of {_EXIT_POLICIES}")

    prev = getattr(config, name)
    setattr(config, name, value)
    logger.debug("config override %s: %r -> %r", name, prev, value)
    try:
        yield
    finally:
        setattr(config, name, prev)


class NoGradGuard:
    """
    Scoped switch disabling graph recording.

    Entering the guard disables recording. Leaving it (normally or through an
    exception) applies the thread's ``no_grad_exit_policy``.

    Notes
    -----
    A guard instance may be re-entered after it has exited, but not while it
    is active.
    """

    def __init__(self) -> None:
        self._prev: Optional[bool] = None

    def __enter__(self) -> "NoGradGuard":
        if self._prev is not None:
            raise RuntimeError("NoGradGuard is already active")
        self._prev = config.enable_backprop
        config.enable_backprop = False
        logger.debug("no_grad enter (previous enable_backprop=%s)", self._prev)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        prev, self._prev = self._prev, None
        if config.no_grad_exit_policy == EXIT_RESET:
            config.enable_backprop = True
        else:
            config.enable_backprop = prev
        logger.debug(
            "no_grad exit (policy=%s, enable_backprop=%s)",
            config.no_grad_exit_policy,
            config.enable_backprop,
        )


def no_grad() -> NoGradGuard:
    """
    Return a guard that disables graph recording while active.

    Examples
    --------
    >>> with no_grad():
    ...     y = square(x)   # y is a detached leaf
    """
    return NoGradGuard()


def is_enable_backprop() -> bool:
    return config.enable_backprop


def is_no_grad_enabled() -> bool:
    """
    True while graph recording is disabled in the current thread.
    """
    return not config.enable_backprop
