import unittest

from src.keygrad.domain.utils._control_path import create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder()

    def test_state_must_be_hashable(self) -> None:
        class C:
            @property
            def _state(self):
                return "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            self.decorator(C, C.foo, state={"not": "hashable"})(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_unhashable_member_of_state_collection_is_rejected(self) -> None:
        class C:
            _state = "A"

            def foo(self) -> int:
                return 0

        with self.assertRaises(TypeError):
            self.decorator(C, C.foo, state=("A", ["B"]))(lambda self: 1)

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                # base implementation never used once wrapper installed
                return -999

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, state="B")
        def foo_B(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("A").foo(1), 11)
        self.assertEqual(C("B").foo(1), 21)

    def test_implementation_receives_self(self) -> None:
        class C:
            _state = "A"

            def __init__(self, base: int) -> None:
                self.base = base

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return self.base + x

        self.assertEqual(C(5).foo(2), 7)

    def test_state_collection_registers_every_member(self) -> None:
        class C:
            def __init__(self, st):
                self._state = st

            def foo(self) -> str:
                return "base"

        @self.decorator(C, C.foo, state=frozenset({"A", "B"}))
        def foo_AB(self) -> str:
            return "ab"

        @self.decorator(C, C.foo, state=("C",))
        def foo_C(self) -> str:
            return "c"

        self.assertEqual(C("A").foo(), "ab")
        self.assertEqual(C("B").foo(), "ab")
        self.assertEqual(C("C").foo(), "c")

    def test_dispatch_supports_none_state(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, state=None)
        def foo_none(self, x: int) -> int:
            return x * 2

        self.assertEqual(C(None).foo(3), 6)

    def test_missing_state_property_raises_not_implemented(self) -> None:
        class C:
            # No _state property on purpose
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)
        self.assertIn("_state", str(ctx.exception))

    def test_missing_control_path_without_trap_exception_raises_not_implemented(
        self,
    ) -> None:
        class C:
            def __init__(self, st):
                self._state = st

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, state="A")
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(NotImplementedError) as ctx:
            C("Z").foo()
        self.assertIn("Missing control path", str(ctx.exception))

    def test_trap_exception_factory_builds_raised_exception(self) -> None:
        calls = []

        def trap(method_name, state):
            calls.append((method_name, state))
            return LookupError(f"{method_name}:{state}")

        class C:
            def __init__(self, st):
                self._state = st

            def foo(self) -> int:
                return 0

        @self.decorator(C, C.foo, state="A", trap_exception=trap)
        def foo_A(self) -> int:
            return 1

        with self.assertRaises(LookupError) as ctx:
            C("Q").foo()
        self.assertEqual(str(ctx.exception), "foo:Q")
        self.assertEqual(calls, [("foo", "Q")])

    def test_custom_state_attribute(self) -> None:
        decorator = create_path_builder("mode")

        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self) -> str:
                return "base"

        @decorator(C, C.foo, state="fast")
        def foo_fast(self) -> str:
            return "fast"

        self.assertEqual(C("fast").foo(), "fast")

    def test_wrapper_preserves_original_method_metadata(self) -> None:
        class C:
            _state = "A"

            def foo(self, x: int) -> int:
                """original doc"""
                return x

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "original doc")

    def test_decorator_returns_sub_method_unchanged(self) -> None:
        class C:
            _state = "A"

            def foo(self) -> int:
                return 0

        def impl(self) -> int:
            return 3

        returned = self.decorator(C, C.foo, state="A")(impl)
        self.assertIs(returned, impl)

    def test_two_builders_do_not_share_control_paths(self) -> None:
        other = create_path_builder()

        class C:
            def __init__(self, st):
                self._state = st

            def foo(self) -> str:
                return "base"

        @self.decorator(C, C.foo, state="A")
        def foo_A(self) -> str:
            return "a"

        class D:
            def __init__(self, st):
                self._state = st

            def foo(self) -> str:
                return "base"

        @other(D, D.foo, state="B")
        def foo_B(self) -> str:
            return "b"

        self.assertEqual(C("A").foo(), "a")
        self.assertEqual(D("B").foo(), "b")
        with self.assertRaises(NotImplementedError):
            D("A").foo()


if __name__ == "__main__":
    unittest.main()
