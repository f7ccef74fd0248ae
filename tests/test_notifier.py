import unittest

from repcount.repdetect.notifier import CountNotifier


class CountNotifierTests(unittest.TestCase):
    def test_notifies_on_change_only(self) -> None:
        notifier = CountNotifier()
        seen = []
        notifier.add_listener(seen.append)

        notifier.value = 1
        notifier.value = 1
        notifier.value += 1

        self.assertEqual(seen, [1, 2])
        self.assertEqual(notifier.value, 2)

    def test_listeners_run_in_registration_order(self) -> None:
        notifier = CountNotifier()
        calls = []
        notifier.add_listener(lambda v: calls.append(("first", v)))
        notifier.add_listener(lambda v: calls.append(("second", v)))

        notifier.value = 3

        self.assertEqual(calls, [("first", 3), ("second", 3)])

    def test_remove_unknown_listener_is_ignored(self) -> None:
        CountNotifier().remove_listener(print)

    def test_dispose_rejects_new_listeners(self) -> None:
        notifier = CountNotifier()
        notifier.dispose()
        with self.assertRaises(RuntimeError):
            notifier.add_listener(print)

    def test_listener_errors_propagate(self) -> None:
        notifier = CountNotifier()

        def boom(_: int) -> None:
            raise RuntimeError("listener failed")

        notifier.add_listener(boom)
        with self.assertRaises(RuntimeError):
            notifier.value = 1
        self.assertEqual(notifier.value, 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
