"""Header naming policy: source column labels to canonical UpperCamel names."""

import unittest

from edw_dumper.planning import CamelCaseHeader, CaseFormat, HeaderDerivationError, rename_header


class RenameHeaderTest(unittest.TestCase):
    def test_upper_underscore_columns(self):
        self.assertEqual(
            rename_header(["TABLE_NAME", "ROW_COUNT"], CaseFormat.UPPER_UNDERSCORE),
            ["TableName", "RowCount"],
        )

    def test_lower_underscore_columns(self):
        self.assertEqual(rename_header(["warehouse_name"], CaseFormat.LOWER_UNDERSCORE), ["WarehouseName"])

    def test_order_and_count_are_preserved(self):
        columns = ["name", "state", "type", "size", "is_default", "name"]
        renamed = rename_header(columns, CaseFormat.LOWER_UNDERSCORE)
        self.assertEqual(renamed, ["Name", "State", "Type", "Size", "IsDefault", "Name"])

    def test_zero_columns_is_a_hard_failure(self):
        with self.assertRaises(HeaderDerivationError):
            rename_header([], CaseFormat.UPPER_UNDERSCORE)

    def test_header_derivation_error_is_a_value_error(self):
        self.assertTrue(issubclass(HeaderDerivationError, ValueError))

    def test_case_format_round_trip_to_upper_underscore(self):
        self.assertEqual(CaseFormat.UPPER_CAMEL.to(CaseFormat.UPPER_UNDERSCORE, "ActiveBytes"), "ACTIVE_BYTES")


class CamelCaseHeaderTest(unittest.TestCase):
    def test_transformer_applies_its_source_format(self):
        transformer = CamelCaseHeader(CaseFormat.UPPER_UNDERSCORE)
        self.assertEqual(transformer(["ACTIVE_BYTES", "ID"]), ["ActiveBytes", "Id"])

    def test_transformers_compare_by_source_format(self):
        self.assertEqual(CamelCaseHeader(CaseFormat.LOWER_UNDERSCORE), CamelCaseHeader(CaseFormat.LOWER_UNDERSCORE))
        self.assertNotEqual(CamelCaseHeader(CaseFormat.LOWER_UNDERSCORE), CamelCaseHeader(CaseFormat.UPPER_UNDERSCORE))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
