"""Fallback and single-shot task composition."""

import unittest

from edw_dumper.planning import CamelCaseHeader, CaseFormat, TaskVariant, compose_single, compose_with_fallback
from edw_dumper.tasks import RunCondition

TEMPLATE = "SELECT database_name, database_owner FROM ${schema}.DATABASES${where}"
HEADER = ("DatabaseName", "DatabaseOwner")
FAST = TaskVariant("databases-au.csv", "SNOWFLAKE.ACCOUNT_USAGE", " WHERE DELETED IS NULL")
FALLBACK = TaskVariant("databases.csv", "INFORMATION_SCHEMA")


class TaskVariantTest(unittest.TestCase):
    def test_where_clause_defaults_to_empty(self):
        self.assertEqual(FALLBACK.where_clause, "")

    def test_format_substitutes_schema_and_where(self):
        self.assertEqual(
            FAST.format(TEMPLATE),
            "SELECT database_name, database_owner FROM SNOWFLAKE.ACCOUNT_USAGE.DATABASES WHERE DELETED IS NULL",
        )

    def test_format_leaves_unrelated_dollar_tokens_alone(self):
        self.assertEqual(FAST.format("SELECT $1, $2 FROM @stage"), "SELECT $1, $2 FROM @stage")

    def test_format_keeps_dollar_quoted_literals(self):
        sql = "SELECT $$it's$$, '$$' FROM x WHERE name LIKE $$%x$$"
        self.assertEqual(FAST.format(sql), sql)
        self.assertEqual(FALLBACK.format(sql), sql)

    def test_format_keeps_dollar_quotes_next_to_placeholders(self):
        self.assertEqual(
            FALLBACK.format("SELECT $$a$$ FROM ${schema}.VIEWS${where} WHERE x = $$b$$"),
            "SELECT $$a$$ FROM INFORMATION_SCHEMA.VIEWS WHERE x = $$b$$",
        )


class ComposeWithFallbackTest(unittest.TestCase):
    def test_standard_mode_plans_primary_then_conditional_fallback(self):
        tasks = compose_with_fallback(HEADER, TEMPLATE, FAST, FALLBACK, assessment=False)

        self.assertEqual(len(tasks), 2)
        fast, fallback = tasks
        self.assertEqual(fast.destination, "databases-au.csv")
        self.assertIn("SNOWFLAKE.ACCOUNT_USAGE.DATABASES", fast.sql)
        self.assertIsNone(fast.dependency)
        self.assertEqual(fallback.destination, "databases.csv")
        self.assertEqual(fallback.sql, "SELECT database_name, database_owner FROM INFORMATION_SCHEMA.DATABASES")
        self.assertEqual(fallback.dependency.predecessor_id, fast.task_id)
        self.assertIs(fallback.dependency.run_if, RunCondition.PREDECESSOR_FAILED)

    def test_both_tasks_share_the_fixed_header(self):
        fast, fallback = compose_with_fallback(HEADER, TEMPLATE, FAST, FALLBACK, assessment=False)
        self.assertEqual(fast.header, HEADER)
        self.assertEqual(fallback.header, HEADER)
        self.assertIsNone(fast.header_transformer)

    def test_assessment_mode_plans_only_the_fast_task(self):
        tasks = compose_with_fallback(HEADER, TEMPLATE, FAST, FALLBACK, assessment=True)

        self.assertEqual(len(tasks), 1)
        self.assertEqual(tasks[0].destination, "databases-au.csv")
        self.assertIn("SNOWFLAKE.ACCOUNT_USAGE", tasks[0].sql)
        self.assertIsNone(tasks[0].dependency)

    def test_override_without_placeholders_is_used_for_both_variants(self):
        fast, fallback = compose_with_fallback(HEADER, "SELECT 1, 2", FAST, FALLBACK, assessment=False)
        self.assertEqual(fast.sql, "SELECT 1, 2")
        self.assertEqual(fallback.sql, "SELECT 1, 2")


class ComposeSingleTest(unittest.TestCase):
    def test_single_task_uses_dynamic_header(self):
        variant = TaskVariant("warehouses-au.csv", "SNOWFLAKE.ACCOUNT_USAGE")
        transformer = CamelCaseHeader(CaseFormat.LOWER_UNDERSCORE)

        task = compose_single("SHOW WAREHOUSES", variant, transformer)

        self.assertEqual(task.destination, "warehouses-au.csv")
        self.assertEqual(task.sql, "SHOW WAREHOUSES")
        self.assertIsNone(task.header)
        self.assertIsNone(task.dependency)
        self.assertEqual(task.resolve_header(["warehouse_name", "auto_suspend"]), ["WarehouseName", "AutoSuspend"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
