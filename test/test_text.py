import logging
import unittest

import numpy as np

from numratio import text
from numratio.exceptions import ParseRatioError, RatioError, RatioErrorKind
from numratio.ratio import Ratio, Rational8, RationalU8


class TestParseRatioPair(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(text.parse_ratio_pair("1/2"), (1, 2))
        self.assertEqual(text.parse_ratio_pair("-1/2"), (-1, 2))
        self.assertEqual(text.parse_ratio_pair("+3"), (3, 1))
        self.assertEqual(text.parse_ratio_pair("7"), (7, 1))
        self.assertEqual(text.parse_ratio_pair("4/-6"), (4, -6))

    def test_not_reduced(self):
        self.assertEqual(text.parse_ratio_pair("2/4"), (2, 4))

    def test_parse_error(self):
        for bad in ["0 /1", "abc", "", "1/", "/2", "--1/2", "3/2/1",
                    " 1/2", "1_0/3", "1.5/2"]:
            with self.assertRaises(ParseRatioError) as cm:
                text.parse_ratio_pair(bad)
            self.assertEqual(cm.exception.kind, RatioErrorKind.PARSE_ERROR)

    def test_zero_denominator(self):
        with self.assertRaises(ParseRatioError) as cm:
            text.parse_ratio_pair("1/0")
        self.assertEqual(cm.exception.kind, RatioErrorKind.ZERO_DENOMINATOR)

    def test_radix(self):
        self.assertEqual(text.parse_ratio_pair("ff/10", radix=16), (255, 16))
        self.assertEqual(text.parse_ratio_pair("-101", radix=2), (-5, 1))
        with self.assertRaises(ParseRatioError):
            text.parse_ratio_pair("12", radix=2)
        with self.assertRaises(ValueError):
            text.parse_ratio_pair("1/2", radix=1)
        with self.assertRaises(ValueError):
            text.parse_ratio_pair("1/2", radix=37)

    def test_base_prefix(self):
        for bad, radix in [("0x1f", 16), ("0X1F", 16), ("0b11/0b1", 2),
                           ("0o17", 8), ("-0x1", 16)]:
            with self.assertRaises(ParseRatioError) as cm:
                text.parse_ratio_pair(bad, radix=radix)
            self.assertEqual(cm.exception.kind, RatioErrorKind.PARSE_ERROR)
        with self.assertRaises(ParseRatioError):
            Ratio.from_str("0x1f", radix=16)
        # b is a hex digit, so this is 0xb1
        self.assertEqual(text.parse_ratio_pair("0b1", radix=16), (177, 1))
        self.assertEqual(text.parse_ratio_pair("Z/z", radix=36), (35, 35))

    def test_delimiter(self):
        self.assertEqual(text.parse_ratio_pair("3:4", delimiter=":"), (3, 4))

    def test_not_text(self):
        with self.assertRaises(TypeError):
            text.parse_ratio_pair(12)


class TestFormatRatio(unittest.TestCase):

    def test_format(self):
        self.assertEqual(text.format_ratio(1, 2), "1/2")
        self.assertEqual(text.format_ratio(-3, 1), "-3")
        self.assertEqual(text.format_ratio(np.int8(-1), np.int8(2)), "-1/2")
        self.assertEqual(text.format_ratio(np.uint8(5), np.uint8(1)), "5")
        self.assertEqual(text.format_ratio(3, 4, delimiter=":"), "3:4")


class TestFromStr(unittest.TestCase):

    def test_from_str(self):
        self.assertEqual(Ratio.from_str("2/4"), Ratio(1, 2))
        self.assertEqual(Ratio.from_str("-6"), Ratio(-6))
        self.assertEqual(Rational8.from_str("-128"), Rational8(-128))
        self.assertEqual(RationalU8.from_str("255/5"), RationalU8(51))
        self.assertEqual(Ratio.from_str("ff/10", radix=16), Ratio(255, 16))

    def test_big(self):
        r = Ratio.from_str(f"{10**30}/3")
        self.assertEqual(r.numerator, 10**30)

    def test_does_not_fit(self):
        with self.assertRaises(ParseRatioError) as cm:
            Rational8.from_str("200/3")
        self.assertEqual(cm.exception.kind, RatioErrorKind.PARSE_ERROR)
        with self.assertRaises(ParseRatioError):
            RationalU8.from_str("-1/2")

    def test_zero_denominator(self):
        with self.assertRaises(ParseRatioError) as cm:
            Rational8.from_str("1/0")
        self.assertEqual(cm.exception.kind, RatioErrorKind.ZERO_DENOMINATOR)

    def test_instance_passes_through(self):
        r = Ratio(3, 7)
        self.assertIs(Ratio.from_str(r), r)

    def test_round_trip(self):
        for r in [Ratio(1, 2), Ratio(-7, 3), Ratio(0), Ratio(10**20, 7)]:
            self.assertEqual(Ratio.from_str(str(r)), r)
        r = Rational8(-5, 6)
        self.assertEqual(Rational8.from_str(str(r)), r)

    def test_error_types(self):
        with self.assertRaises(ParseRatioError) as cm:
            Ratio.from_str("x/2")
        err = cm.exception
        self.assertIsInstance(err, ValueError)
        self.assertIsInstance(err, RatioError)
        self.assertEqual(str(err), "failed to parse integer: 'x/2'")
        self.assertEqual(err.text, "x/2")
        self.assertEqual(str(ParseRatioError(RatioErrorKind.ZERO_DENOMINATOR)),
                         "zero value denominator")


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
