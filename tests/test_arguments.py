"""Run configuration parsing and validation."""

import unittest

from edw_dumper.connectors import ConnectorArguments, ConnectorConfigError, ConnectorProperty, validate_config
from edw_dumper.connectors.snowflake import SnowflakeMetadataConnector


class ValidateConfigTest(unittest.TestCase):
    def test_connector_is_required(self):
        with self.assertRaisesRegex(ValueError, "connector"):
            validate_config({"assessment": True})

    def test_assessment_must_be_boolean(self):
        with self.assertRaises(ValueError):
            validate_config({"connector": "snowflake", "assessment": "yes"})

    def test_definitions_must_be_an_object(self):
        with self.assertRaises(ValueError):
            validate_config({"connector": "snowflake", "definitions": ["a=b"]})

    def test_minimal_config_is_valid(self):
        validate_config({"connector": "snowflake"})


class ConnectorArgumentsTest(unittest.TestCase):
    def test_from_config(self):
        args = ConnectorArguments.from_config(
            {
                "connector": "Snowflake",
                "assessment": True,
                "test_flags": "A",
                "definitions": {"snowflake.metadata.tables.where": "x=1"},
            }
        )
        self.assertEqual(args.connector, "snowflake")
        self.assertTrue(args.is_assessment())
        self.assertTrue(args.inject_info_schema_fault)
        self.assertEqual(
            args.get_definition(ConnectorProperty("snowflake.metadata.tables.where", "")),
            "x=1",
        )

    def test_defaults(self):
        args = ConnectorArguments.from_config({"connector": "snowflake", "definitions": None, "test_flags": None})
        self.assertFalse(args.is_assessment())
        self.assertFalse(args.inject_info_schema_fault)
        self.assertEqual(dict(args.definitions), {})

    def test_absent_definition_is_none(self):
        args = ConnectorArguments()
        self.assertIsNone(args.get_definition(ConnectorProperty("snowflake.metadata.tables.query", "")))

    def test_unknown_definition_is_rejected(self):
        args = ConnectorArguments(definitions={"snowflake.metadata.table.query": "SELECT 1"})
        with self.assertRaisesRegex(ConnectorConfigError, "snowflake.metadata.table.query"):
            args.validate_definitions(SnowflakeMetadataConnector().properties())

    def test_blank_definition_is_rejected(self):
        args = ConnectorArguments(definitions={"snowflake.metadata.views.where": ""})
        with self.assertRaises(ConnectorConfigError):
            args.validate_definitions(SnowflakeMetadataConnector().properties())

    def test_known_definitions_pass(self):
        args = ConnectorArguments(
            definitions={
                "snowflake.metadata.views.where": "table_schema = 'X'",
                "snowflake.metadata.table_storage_metrics.query": "SELECT 1",
            }
        )
        args.validate_definitions(SnowflakeMetadataConnector().properties())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
