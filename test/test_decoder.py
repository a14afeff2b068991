#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from binconv import BinaryDecoder, DecodeError, decode, generate, parse, tokenize


class DecoderTests(unittest.TestCase):
    def test_hi(self) -> None:
        self.assertEqual(decode("1101000 1101001"), "hi")

    def test_single_group(self) -> None:
        self.assertEqual(decode("1000001"), "A")
        self.assertEqual(decode("0"), "\x00")

    def test_leading_zeros_are_accepted(self) -> None:
        self.assertEqual(decode("01101000"), "h")

    def test_roundtrip(self) -> None:
        for text in ("hi", "Hello, World", "  padded  ", "tab\tnew\nline", "привет", "😊 ok", "0101"):
            self.assertEqual(decode(generate(parse(tokenize(text + "!")))), text)

    def test_invalid_digit(self) -> None:
        with self.assertRaises(DecodeError):
            decode("1101000 1102001")

    def test_empty_group(self) -> None:
        with self.assertRaises(DecodeError):
            decode("1101000  1101001")
        with self.assertRaises(DecodeError):
            decode("")

    def test_other_whitespace_is_not_a_separator(self) -> None:
        with self.assertRaises(DecodeError):
            decode("1101000\t1101001")

    def test_python_int_syntax_is_rejected(self) -> None:
        for group in ("0b101", "1_0", "+1", "-1"):
            with self.assertRaises(DecodeError):
                decode(group)

    def test_out_of_range_code_point(self) -> None:
        with self.assertRaises(DecodeError):
            decode("1" * 22)

    def test_surrogate_code_points_are_rejected(self) -> None:
        for group in ("1101100000000000", "1101111111111111", "1101100000000000 1101000"):
            with self.assertRaises(DecodeError) as ctx:
                decode(group)
            self.assertIn("Surrogate", str(ctx.exception))

    def test_code_points_around_surrogates(self) -> None:
        self.assertEqual(decode("1101011111111111"), "\ud7ff")
        self.assertEqual(decode("1110000000000000"), "\ue000")

    def test_decode_error_names_group(self) -> None:
        with self.assertRaises(DecodeError) as ctx:
            decode("1 1 x")
        self.assertIn("Group 2", str(ctx.exception))

    def test_decoder_instance_is_reusable(self) -> None:
        decoder = BinaryDecoder()
        self.assertEqual(decoder.decode("1101000"), "h")
        decoder.reset()
        self.assertEqual(decoder.decode("1101001"), "i")


if __name__ == "__main__":
    unittest.main()
