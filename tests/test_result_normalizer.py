from __future__ import annotations

import unittest
from decimal import Decimal

from app.core.exceptions import ExtractionFailed
from app.shared.database.procedures import ResultKind, classify_result
from app.shared.services.result_normalizer import as_number, normalize_result, refusal_message


class ClassifyResultTests(unittest.TestCase):
    def test_single_mapping_is_a_row(self) -> None:
        result = classify_result({'affectedRows': 1, 'insertId': 5})
        self.assertEqual(result.kind, ResultKind.ROW)
        self.assertEqual(result.first_row(), {'affectedRows': 1, 'insertId': 5})
        self.assertEqual(result.row_sets, [])

    def test_list_of_rows_is_a_row_set(self) -> None:
        result = classify_result([{'a': 1}, {'a': 2}])
        self.assertEqual(result.kind, ResultKind.ROW_SET)
        self.assertEqual(result.row_sets, [[{'a': 1}, {'a': 2}]])

    def test_trailing_ok_packet_becomes_the_header(self) -> None:
        result = classify_result([[{'a': 1}], [{'b': 2}], {'affectedRows': 0, 'insertId': 0}])
        self.assertEqual(result.kind, ResultKind.ROW_SET_LIST)
        self.assertEqual(result.row_sets, [[{'a': 1}], [{'b': 2}]])
        self.assertEqual(result.header, {'affectedRows': 0, 'insertId': 0})

    def test_empty_shapes(self) -> None:
        self.assertEqual(classify_result(None).kind, ResultKind.EMPTY)
        self.assertIsNone(classify_result([]).first_row())

    def test_unknown_shape_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            classify_result(42)


class NormalizeResultTests(unittest.TestCase):
    def test_same_row_in_every_shape_normalizes_identically(self) -> None:
        row = {'product_id': 12, 'status': 1, 'message': 'Product saved'}
        shapes = [row, [row], [[row]]]
        results = {normalize_result(shape) for shape in shapes}
        self.assertEqual(len(results), 1)
        normalized = results.pop()
        self.assertEqual(normalized.identifier, 12)
        self.assertEqual(normalized.message, 'Product saved')

        with_ok_packet = normalize_result([[row], {'affectedRows': 1, 'insertId': 0}])
        self.assertEqual(with_ok_packet.identifier, 12)
        self.assertEqual(with_ok_packet.status_flag, 1)

    def test_status_flag_as_text_or_number(self) -> None:
        self.assertTrue(normalize_result([{'status': '1'}]).succeeded)
        self.assertTrue(normalize_result([{'status': 1}]).succeeded)
        self.assertFalse(normalize_result([{'status': '0', 'affectedRows': 0}]).succeeded)
        self.assertFalse(normalize_result([{'status': 0}]).succeeded)

    def test_refusal_row_outweighs_the_ok_packet(self) -> None:
        ok_packet = {'affectedRows': 1, 'insertId': 0}
        for status in ('0', 0):
            with self.subTest(status=status):
                normalized = normalize_result([[{'status': status, 'message': 'Product not found'}], ok_packet])
                self.assertFalse(normalized.succeeded)
                self.assertIsNone(normalized.affected_count)

    def test_ok_packet_counts_when_no_row_came_back(self) -> None:
        self.assertEqual(normalize_result([[], {'affectedRows': 2, 'insertId': 0}]).affected_count, 2)

    def test_affected_rows_alone_means_success(self) -> None:
        self.assertTrue(normalize_result([{'affectedRows': 2}]).succeeded)
        self.assertTrue(normalize_result({'affectedRows': 1, 'insertId': 0}).succeeded)
        self.assertFalse(normalize_result({'affectedRows': 0, 'insertId': 0}).succeeded)

    def test_identifier_priority(self) -> None:
        self.assertEqual(normalize_result([{'id': 3, 'insertId': 2, 'product_id': 1}]).identifier, 1)
        self.assertEqual(normalize_result([{'id': 3, 'insertId': 2}]).identifier, 2)
        self.assertEqual(normalize_result([{'id': 3}]).identifier, 3)
        self.assertEqual(normalize_result([{'newProductID': '7', 'name': 'x'}]).identifier, 7)

    def test_non_numeric_candidates_are_skipped(self) -> None:
        self.assertEqual(normalize_result([{'product_id': 'abc', 'id': '9'}]).identifier, 9)

    def test_header_insert_id_is_the_last_resort(self) -> None:
        result = [[{'message': 'ok'}], {'affectedRows': 1, 'insertId': 31}]
        self.assertEqual(normalize_result(result, require_identifier=True).identifier, 31)

    def test_missing_identifier_fails_when_required(self) -> None:
        with self.assertRaises(ExtractionFailed) as ctx:
            normalize_result([[{'message': 'saved'}]], require_identifier=True)
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIsNone(normalize_result([[{'message': 'saved'}]]).identifier)

    def test_zero_is_a_valid_identifier(self) -> None:
        self.assertEqual(normalize_result([{'id': 0}], require_identifier=True).identifier, 0)


class AsNumberTests(unittest.TestCase):
    def test_coercion(self) -> None:
        self.assertEqual(as_number('12'), 12)
        self.assertEqual(as_number(' 4.5 '), 4.5)
        self.assertEqual(as_number(Decimal('3.00')), 3)
        self.assertEqual(as_number(b'8'), 8)

    def test_not_numbers(self) -> None:
        for value in (None, True, '', '  ', 'abc', 'NaN', 'inf', object()):
            self.assertIsNone(as_number(value), value)


class RefusalMessageTests(unittest.TestCase):
    def test_status_row_other_than_one_is_refused(self) -> None:
        self.assertEqual(refusal_message([[{'status': 0, 'error': 'Old password wrong'}]], 'failed'), 'Old password wrong')
        self.assertEqual(refusal_message([[{'status': '0'}]], 'failed'), 'failed')

    def test_success_or_no_status_row(self) -> None:
        self.assertIsNone(refusal_message([[{'status': 1, 'message': 'done'}]], 'failed'))
        self.assertIsNone(refusal_message({'affectedRows': 1, 'insertId': 0}, 'failed'))
        self.assertIsNone(refusal_message([[{'name': 'x'}]], 'failed'))


if __name__ == '__main__':
    unittest.main()
