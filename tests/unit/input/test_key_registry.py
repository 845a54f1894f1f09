"""Tests for the key dispatch table."""

from __future__ import annotations

import unittest

from dirnav.input import KeyComboBinding, KeyComboRegistry


class KeyComboRegistryTests(unittest.TestCase):
    def test_all_combos_of_a_binding_reach_its_handler(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(("DOWN", "j"), lambda: calls.append("down")),
            KeyComboBinding(("q",), lambda: calls.append("quit")),
        )

        self.assertTrue(registry.dispatch("j"))
        self.assertTrue(registry.dispatch("DOWN"))
        self.assertTrue(registry.dispatch("q"))

        self.assertEqual(calls, ["down", "down", "quit"])

    def test_unbound_key_is_reported_and_ignored(self) -> None:
        registry = KeyComboRegistry()

        self.assertFalse(registry.dispatch("x"))

    def test_later_binding_overrides_earlier_combo(self) -> None:
        calls: list[str] = []
        registry = KeyComboRegistry()
        registry.register_binding(KeyComboBinding(("x",), lambda: calls.append("first")))
        registry.register_binding(KeyComboBinding(("x",), lambda: calls.append("second")))

        registry.dispatch("x")

        self.assertEqual(calls, ["second"])
        self.assertEqual(len(registry.bindings()), 2)
