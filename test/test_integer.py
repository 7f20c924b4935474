import logging
import unittest

import numpy as np

from numratio.integer import (
    BIG_INTEGER,
    FixedWidthInteger,
    get_integer
)


class TestGetInteger(unittest.TestCase):

    def test_aliases_share_instance(self):
        self.assertIs(get_integer("i8"), get_integer("int8"))
        self.assertIs(get_integer("INT32"), get_integer("i32"))
        self.assertIs(get_integer("isize"), get_integer("int64"))

    def test_bigint(self):
        self.assertIs(get_integer("bigint"), BIG_INTEGER)
        self.assertIs(get_integer("big", overflow="raise"), BIG_INTEGER)

    def test_overflow_policy_separates_instances(self):
        wrap = get_integer("int8")
        raise_ = get_integer("int8", overflow="raise")
        self.assertIsNot(wrap, raise_)
        self.assertEqual(raise_.overflow, "raise")

    def test_unknown_name(self):
        with self.assertRaises(NotImplementedError):
            get_integer("float32")

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            get_integer("int8", overflow="saturate")
        with self.assertRaises(ValueError):
            FixedWidthInteger(np.int8, overflow="saturate")

    def test_non_integer_dtype(self):
        with self.assertRaises(TypeError):
            FixedWidthInteger(np.float32)


class TestBigInteger(unittest.TestCase):

    def test_truncating_division(self):
        self.assertEqual(BIG_INTEGER.div(-7, 2), -3)
        self.assertEqual(BIG_INTEGER.rem(-7, 2), -1)
        self.assertEqual(BIG_INTEGER.div(7, -2), -3)
        self.assertEqual(BIG_INTEGER.rem(7, -2), 1)
        self.assertEqual(BIG_INTEGER.div_mod_floor(-7, 2), (-4, 1))

    def test_zero_divisor(self):
        with self.assertRaises(ZeroDivisionError):
            BIG_INTEGER.div(1, 0)
        with self.assertRaises(ZeroDivisionError):
            BIG_INTEGER.rem(1, 0)
        self.assertIsNone(BIG_INTEGER.checked_div(1, 0))
        self.assertIsNone(BIG_INTEGER.checked_rem(1, 0))

    def test_never_overflows(self):
        big = 2**200
        self.assertEqual(BIG_INTEGER.checked_mul(big, big), 2**400)
        self.assertEqual(BIG_INTEGER.checked_pow(2, 300), 2**300)

    def test_gcd(self):
        self.assertEqual(BIG_INTEGER.gcd(0, 5), 5)
        self.assertEqual(BIG_INTEGER.gcd(-4, 6), 2)

    def test_coerce(self):
        self.assertEqual(BIG_INTEGER.coerce(np.int16(-3)), -3)
        self.assertIs(type(BIG_INTEGER.coerce(np.int16(-3))), int)
        with self.assertRaises(TypeError):
            BIG_INTEGER.coerce(1.5)
        with self.assertRaises(TypeError):
            BIG_INTEGER.coerce(True)


class TestFixedWidthInteger(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.int8 = get_integer("int8")
        cls.int8_raise = get_integer("int8", overflow="raise")
        cls.uint8 = get_integer("uint8")

    def test_bounds(self):
        self.assertEqual(self.int8.min_value, -128)
        self.assertEqual(self.int8.max_value, 127)
        self.assertEqual(self.uint8.max_value, 255)
        self.assertTrue(self.int8.signed)
        self.assertFalse(self.uint8.signed)

    def test_stored_type(self):
        value = self.int8.coerce(3)
        self.assertIsInstance(value, np.int8)
        self.assertIsInstance(self.int8.add(value, value), np.int8)

    def test_coerce_out_of_range(self):
        with self.assertRaises(OverflowError):
            self.int8.coerce(300)
        with self.assertRaises(OverflowError):
            self.uint8.coerce(-1)

    def test_wrap(self):
        self.assertEqual(self.int8.add(127, 1), -128)
        self.assertEqual(self.int8.mul(16, 16), 0)
        self.assertEqual(self.int8.neg(-128), -128)
        self.assertEqual(self.int8.div(-128, -1), -128)
        self.assertEqual(self.uint8.sub(0, 1), 255)
        self.assertEqual(self.int8.pow(2, 7), -128)

    def test_raise(self):
        with self.assertRaises(OverflowError):
            self.int8_raise.add(127, 1)
        with self.assertRaises(OverflowError):
            self.int8_raise.neg(-128)
        self.assertEqual(self.int8_raise.add(100, 27), 127)

    def test_checked(self):
        self.assertIsNone(self.int8.checked_add(127, 1))
        self.assertIsNone(self.int8.checked_mul(16, 8))
        self.assertEqual(self.int8.checked_mul(-16, 8), -128)
        self.assertIsNone(self.int8.checked_neg(-128))
        self.assertIsNone(self.int8.checked_div(-128, -1))
        self.assertIsNone(self.int8.checked_rem(-128, -1))
        self.assertIsNone(self.uint8.checked_sub(0, 1))
        self.assertIsNone(self.int8.checked_pow(2, 8))
        self.assertEqual(self.int8.checked_pow(2, 6), 64)
        self.assertIsNone(self.int8.checked_gcd(-128, 0))

    def test_truncating_division(self):
        self.assertEqual(self.int8.div(-7, 2), -3)
        self.assertEqual(self.int8.rem(-7, 2), -1)
        self.assertEqual(self.int8.div_mod_floor(-7, 2), (-4, 1))
        with self.assertRaises(ZeroDivisionError):
            self.int8.div(1, 0)

    def test_gcd(self):
        self.assertEqual(self.int8.gcd(0, -5), 5)
        self.assertEqual(self.int8.gcd(-4, 6), 2)

    def test_fits(self):
        self.assertTrue(self.int8.fits(-128))
        self.assertFalse(self.int8.fits(128))
        self.assertTrue(BIG_INTEGER.fits(2**100))


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
