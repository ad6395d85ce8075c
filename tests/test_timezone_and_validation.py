from __future__ import annotations

import unittest
from datetime import datetime, timezone
from decimal import Decimal

from app.core.exceptions import InvalidRequest
from app.shared.utils.timezone import business_now
from app.shared.utils.validation import (
    blank_to_none, is_missing, optional_text, parse_amount, parse_int, require_fields
)


class BusinessTimeTests(unittest.TestCase):
    def test_utc_midnight_is_half_past_five_in_kolkata(self) -> None:
        moment = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(business_now(moment), '2024-01-01 05:30:00')

    def test_evening_uses_24_hour_clock(self) -> None:
        moment = datetime(2024, 6, 30, 15, 5, 9, tzinfo=timezone.utc)
        self.assertEqual(business_now(moment), '2024-06-30 20:35:09')

    def test_default_is_now(self) -> None:
        self.assertRegex(business_now(), r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$')


class RequiredFieldTests(unittest.TestCase):
    def test_missing_names_are_reported_in_order(self) -> None:
        with self.assertRaises(InvalidRequest) as ctx:
            require_fields({'a': None, 'b': 'x', 'c': '  '}, 'Fields required')
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.to_content(), {
            'success': False, 'message': 'Fields required', 'missing': ['a', 'c'],
        })

    def test_blank_allowed_when_asked(self) -> None:
        require_fields({'a': '', 'b': 0}, 'Fields required', allow_empty=True)
        self.assertTrue(is_missing(None, allow_empty=True))
        self.assertFalse(is_missing(0))

    def test_text_helpers(self) -> None:
        self.assertIsNone(blank_to_none('  '))
        self.assertEqual(blank_to_none(5), 5)
        self.assertEqual(optional_text(' 8901 '), '8901')
        self.assertIsNone(optional_text(''))


class NumberParsingTests(unittest.TestCase):
    def test_amounts(self) -> None:
        self.assertEqual(parse_amount(' 99.50 ', 'price'), Decimal('99.50'))
        self.assertEqual(parse_amount(0, 'price'), Decimal('0'))

    def test_bad_amounts(self) -> None:
        for value, message in (
            ('abc', 'price must be a number'),
            ('-1', 'price must be a non-negative number'),
            ('NaN', 'price must be a non-negative number'),
        ):
            with self.subTest(value=value):
                with self.assertRaises(InvalidRequest) as ctx:
                    parse_amount(value, 'price')
                self.assertEqual(ctx.exception.message, message)

    def test_integers(self) -> None:
        self.assertEqual(parse_int(' 7 ', 'FLoginId'), 7)
        with self.assertRaises(InvalidRequest):
            parse_int('7.5', 'FLoginId')


if __name__ == '__main__':
    unittest.main()
