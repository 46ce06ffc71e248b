import threading
import unittest

import numpy as np

from src.keygrad.infrastructure._config import (
    NoGradGuard,
    config,
    is_enable_backprop,
    is_no_grad_enabled,
    no_grad,
    using_config,
)
from src.keygrad.infrastructure._variable import Variable
from src.keygrad.infrastructure.operators import square


class TestUsingConfig(unittest.TestCase):
    def test_override_and_restore(self) -> None:
        self.assertTrue(is_enable_backprop())
        with using_config("enable_backprop", False):
            self.assertFalse(is_enable_backprop())
        self.assertTrue(is_enable_backprop())

    def test_restore_on_exception(self) -> None:
        with self.assertRaises(KeyError):
            with using_config("enable_backprop", False):
                raise KeyError("boom")
        self.assertTrue(config.enable_backprop)

    def test_unknown_attribute(self) -> None:
        with self.assertRaises(AttributeError):
            with using_config("no_such_flag", 1):
                pass

    def test_invalid_exit_policy(self) -> None:
        with self.assertRaises(ValueError):
            with using_config("no_grad_exit_policy", "sometimes"):
                pass


class TestNoGrad(unittest.TestCase):
    def test_disables_recording(self) -> None:
        x = Variable(np.array(3.0))
        with no_grad():
            self.assertTrue(is_no_grad_enabled())
            y = square(x)
        self.assertFalse(is_no_grad_enabled())
        self.assertIsNone(y.creator)
        self.assertEqual(y.generation, 0)
        self.assertEqual(y.data.item(), 9.0)

    def test_nested_guards_restore_outer_state(self) -> None:
        with using_config("no_grad_exit_policy", "restore"):
            with no_grad():
                with no_grad():
                    self.assertFalse(config.enable_backprop)
                self.assertFalse(config.enable_backprop)
            self.assertTrue(config.enable_backprop)

    def test_reset_policy_reenables_on_inner_exit(self) -> None:
        with using_config("no_grad_exit_policy", "reset"):
            with no_grad():
                with no_grad():
                    pass
                self.assertTrue(config.enable_backprop)
            self.assertTrue(config.enable_backprop)

    def test_restores_on_exception(self) -> None:
        with self.assertRaises(RuntimeError):
            with no_grad():
                raise RuntimeError("inside")
        self.assertTrue(config.enable_backprop)

    def test_guard_inside_disabled_scope_keeps_it_disabled(self) -> None:
        with using_config("enable_backprop", False):
            with no_grad():
                pass
            self.assertFalse(config.enable_backprop)

    def test_guard_cannot_be_entered_twice_while_active(self) -> None:
        guard = NoGradGuard()
        with guard:
            with self.assertRaises(RuntimeError):
                guard.__enter__()
        with guard:
            self.assertTrue(is_no_grad_enabled())
        self.assertFalse(is_no_grad_enabled())

    def test_state_is_per_thread(self) -> None:
        seen = []
        entered = threading.Event()
        release = threading.Event()

        def worker() -> None:
            with no_grad():
                entered.set()
                release.wait(5)

        t = threading.Thread(target=worker)
        t.start()
        entered.wait(5)
        seen.append(config.enable_backprop)
        release.set()
        t.join(5)
        self.assertEqual(seen, [True])

    def test_new_thread_starts_with_recording_enabled(self) -> None:
        result = []
        with no_grad():
            t = threading.Thread(target=lambda: result.append(is_enable_backprop()))
            t.start()
            t.join(5)
        self.assertEqual(result, [True])


if __name__ == "__main__":
    unittest.main()
