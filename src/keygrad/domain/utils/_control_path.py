"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to one
of several registered implementations based on a runtime state attribute of
the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute of `self` and
  dispatches to the implementation registered for that value.

Intended use-cases
------------------
- Numeric kernels that exist only for some element kinds (e.g. `exp` for
  floating-point data but not for integers or booleans).
- Keeping per-state behaviors isolated as separate functions instead of large
  if/elif chains.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- The selected implementation is called like a bound method, i.e. as
  `sub_method(self, *args, **kwargs)`.
"""

from typing import (
    Callable,
    Hashable,
    Iterable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[str, Any], Exception]
"""Factory building the exception raised when no control path matches."""


def create_path_builder(state_attr: str = "_state") -> Callable[
    [
        Type,
        Callable[P, R],
        Union[Hashable, Iterable[Hashable]],
        Optional[TrapFactory],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, ("B", "C"))
        def foo_BC(self, x: int) -> int:
            ...

    When `MyClass.foo(...)` is called, it dispatches to `foo_A` or `foo_BC`
    depending on `self.mode`.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute (or property) read from `self` to select the
        control path. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control
        path and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )
    """
    Tuple-like key used to uniquely identify a control path.

    Fields
    ------
    ClassName : str
        The owning class name.
    MethodName : str
        The base method name being templated.
    StateVal : Hashable
        The state value that selects this implementation.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def _expand_states(state: Union[Hashable, Iterable[Hashable]]) -> tuple:
        """
        Normalize `state` into a tuple of individual, hashable state values.

        Strings are treated as single states even though they are iterable.
        Sets, frozensets, tuples and lists register the same implementation for
        every contained state.
        """
        if isinstance(state, (set, frozenset, tuple, list)):
            states = tuple(state)
        else:
            states = (state,)
        for s in states:
            try:
                hash(s)
            except TypeError:
                raise TypeError(
                    f"The argument for 'state' must be hashable. Got {repr(s)}"
                ) from None
        return states

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Union[Hashable, Iterable[Hashable]],
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable or iterable of Hashable
            The state value(s) selecting the decorated implementation.
        trap_exception : Optional[Callable[[str, Any], Exception]]
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - Otherwise it is called as `trap_exception(method_name, state)`
              and the returned exception is raised.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that, when applied to `sub_method`, registers
            `sub_method` for every requested state and installs/updates the
            dispatcher wrapper on `cls`.

        Raises
        ------
        TypeError
            If any requested state is not hashable.
        """
        states = _expand_states(state)
        method_name = method.__name__

        def _get_cur_smk(self: Any) -> MethodKey:
            """
            Compute the method key for the *current* runtime state of `self`.
            """
            return MethodKey(cls.__name__, method_name, getattr(self, state_attr))

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured states.

            Parameters
            ----------
            sub_method : Callable[P, R]
                The implementation to run when the state of `self` is one of
                the configured states.

            Returns
            -------
            Callable[P, R]
                The original `sub_method` (returned unchanged), enabling normal
                decorator stacking and introspection.
            """
            for s in states:
                methods_map[MethodKey(cls.__name__, method_name, s)] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the state of `self`.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                if sm := methods_map.get(_get_cur_smk(self)):
                    return sm(self, *args, **kwargs)
                cur_state = getattr(self, state_attr)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(method_name)
                        )
                    )
                raise trap_exception(method_name, cur_state)

            setattr(cls, method_name, wrapper)
            return sub_method

        return decorator

    return templator
