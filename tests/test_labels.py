"""Tests for the index <-> label numeral system."""

from __future__ import annotations

import unittest

from lazyhop.hints.errors import InvalidSymbol
from lazyhop.hints.labels import decode, encode, label_width, labels_for, pad_label

ASD = ("a", "s", "d")


class EncodeDecodeTests(unittest.TestCase):
    def test_zero_is_first_symbol_not_empty(self) -> None:
        self.assertEqual(encode(0, ASD), "a")

    def test_most_significant_digit_first(self) -> None:
        self.assertEqual(encode(3, ASD), "sa")
        self.assertEqual(encode(5, ASD), "sd")
        self.assertEqual(encode(9, ASD), "saa")

    def test_decode_inverts_encode_below_radix_power(self) -> None:
        for width in (1, 2, 3):
            for index in range(len(ASD) ** width):
                self.assertEqual(decode(encode(index, ASD), ASD), index)

    def test_leading_zero_symbols_do_not_change_value(self) -> None:
        self.assertEqual(decode("aas", ASD), decode("s", ASD))
        self.assertEqual(encode(decode("aad", ASD), ASD), "d")

    def test_decode_rejects_symbols_outside_alphabet(self) -> None:
        with self.assertRaises(InvalidSymbol) as ctx:
            decode("ax", ASD)
        self.assertEqual(ctx.exception.symbol, "x")

    def test_encode_rejects_negative_index(self) -> None:
        with self.assertRaises(ValueError):
            encode(-1, ASD)

    def test_single_key_alphabet_addresses_one_hint(self) -> None:
        self.assertEqual(encode(0, ("a",)), "a")
        with self.assertRaises(ValueError):
            encode(1, ("a",))
        self.assertEqual(label_width(5, 1), 1)


class WidthTests(unittest.TestCase):
    def test_width_is_minimum_needed(self) -> None:
        self.assertEqual(label_width(0, 3), 1)
        self.assertEqual(label_width(1, 3), 1)
        self.assertEqual(label_width(3, 3), 1)
        self.assertEqual(label_width(4, 3), 2)
        self.assertEqual(label_width(9, 3), 2)
        self.assertEqual(label_width(10, 3), 3)
        self.assertEqual(label_width(300, 26), 2)

    def test_pad_label_left_pads_with_zero_symbol(self) -> None:
        self.assertEqual(pad_label("d", 3, ASD), "aad")
        self.assertEqual(pad_label("sd", 1, ASD), "sd")

    def test_five_targets_over_three_keys(self) -> None:
        self.assertEqual(labels_for(5, ASD), ["aa", "as", "ad", "sa", "ss"])

    def test_labels_share_width_and_are_unique(self) -> None:
        labels = labels_for(30, ASD)
        self.assertEqual({len(label) for label in labels}, {4})
        self.assertEqual(len(set(labels)), 30)


if __name__ == "__main__":
    unittest.main()
