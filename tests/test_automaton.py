from __future__ import annotations

import unittest

from lazyhop.hints.automaton import HintInput, InputAutomaton
from lazyhop.hints.labels import labels_for

ASD = ("a", "s", "d")


class InputAutomatonTests(unittest.TestCase):
    def test_every_label_resolves_to_its_index(self) -> None:
        automaton = InputAutomaton(ASD)
        automaton.ensure_width(2)
        for index, label in enumerate(labels_for(9, ASD)):
            self.assertEqual(automaton.resolve(label, width=2), index)

    def test_incomplete_and_unknown_sequences_do_not_resolve(self) -> None:
        automaton = InputAutomaton(ASD)
        automaton.ensure_width(2)
        self.assertIsNone(automaton.resolve("a", width=2))
        self.assertIsNone(automaton.resolve("ax", width=2))
        self.assertIsNone(automaton.resolve("asd", width=2))

    def test_growing_width_reuses_existing_levels(self) -> None:
        automaton = InputAutomaton(ASD)
        automaton.ensure_width(2)
        level_one = automaton.dispatch(1)
        level_two = automaton.dispatch(2)
        automaton.ensure_width(4)
        self.assertEqual(automaton.width, 4)
        self.assertIs(automaton.dispatch(1), level_one)
        self.assertIs(automaton.dispatch(2), level_two)
        self.assertIs(automaton.dispatch(3).lookup("a").next_table, level_two)

    def test_shrinking_width_keeps_levels(self) -> None:
        automaton = InputAutomaton(ASD)
        automaton.ensure_width(3)
        automaton.ensure_width(1)
        self.assertEqual(automaton.width, 3)

    def test_level_one_completes_labels(self) -> None:
        automaton = InputAutomaton(ASD)
        table = automaton.dispatch(1)
        self.assertEqual(table.keys(), ASD)
        self.assertIsNone(table.lookup("d").next_table)
        self.assertEqual(table.lookup("d").digit, 2)


class HintInputTests(unittest.TestCase):
    def test_feed_walks_down_levels(self) -> None:
        reader = HintInput(InputAutomaton(ASD).dispatch(2))
        self.assertIsNone(reader.feed("s"))
        self.assertEqual(reader.typed, "s")
        self.assertEqual(reader.table.level, 1)
        self.assertEqual(reader.feed("d"), 5)
        self.assertEqual(reader.typed, "")
        self.assertEqual(reader.table.level, 2)

    def test_stray_key_discards_partial_label(self) -> None:
        reader = HintInput(InputAutomaton(ASD).dispatch(2))
        reader.feed("s")
        self.assertIsNone(reader.feed("x"))
        self.assertTrue(reader.rejected)
        self.assertEqual(reader.typed, "")
        self.assertEqual(reader.feed("a"), None)
        self.assertFalse(reader.rejected)
        self.assertEqual(reader.feed("a"), 0)


if __name__ == "__main__":
    unittest.main()
