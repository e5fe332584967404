"""Cross-relation properties that hold for any schema."""

from collections import Counter

import pytest

from infoschema.names import INFORMATION_SCHEMA
from infoschema.registry import VIEW_SPECS


@pytest.fixture(params=["users", "music", "empty"])
def any_catalog(request):
    """Each of the fixture catalogs in turn."""
    return request.getfixturevalue(f"{request.param}_catalog")


class TestUsersScenario:
    """Users(id INT64, email STRING, age INT64), keyed on id, email NOT NULL."""

    def test_columns(self, users_catalog):
        """Test three column rows with ordinals 1, 2, 3."""
        rows = [r for r in users_catalog.records("COLUMNS") if r["TABLE_NAME"] == "Users"]

        assert [(r["COLUMN_NAME"], r["ORDINAL_POSITION"], r["IS_NULLABLE"]) for r in rows] == [
            ("id", 1, "NO"),
            ("email", 2, "NO"),
            ("age", 3, "YES"),
        ]

    def test_table_constraints(self, users_catalog):
        """Test the primary key and not-null constraints."""
        rows = [
            (r["CONSTRAINT_NAME"], r["CONSTRAINT_TYPE"])
            for r in users_catalog.records("TABLE_CONSTRAINTS")
            if r["TABLE_NAME"] == "Users"
        ]

        assert ("PK_Users", "PRIMARY KEY") in rows
        assert ("CK_IS_NOT_NULL_Users_email", "CHECK") in rows
        assert not any(name == "CK_IS_NOT_NULL_Users_age" for name, _ in rows)

    def test_check_clause(self, users_catalog):
        """Test the synthesized not-null clause."""
        clauses = {
            r["CONSTRAINT_NAME"]: r["CHECK_CLAUSE"]
            for r in users_catalog.records("CHECK_CONSTRAINTS")
        }

        assert clauses["CK_IS_NOT_NULL_Users_email"] == "email IS NOT NULL"

    def test_primary_key_index_column(self, users_catalog):
        """Test the single primary key index column."""
        rows = [
            r for r in users_catalog.records("INDEX_COLUMNS")
            if r["TABLE_NAME"] == "Users"
        ]

        assert [(r["INDEX_NAME"], r["INDEX_TYPE"], r["COLUMN_NAME"], r["ORDINAL_POSITION"]) for r in rows] == [
            ("PRIMARY_KEY", "PRIMARY_KEY", "id", 1),
        ]

    def test_string_type_text(self, users_catalog):
        """Test that an unsized string renders as STRING(MAX)."""
        email = [
            r for r in users_catalog.records("COLUMNS")
            if r["TABLE_NAME"] == "Users" and r["COLUMN_NAME"] == "email"
        ]
        assert email[0]["SPANNER_TYPE"] == "STRING(MAX)"


class TestRowCountConsistency:
    """Column ordinals and counts."""

    def test_ordinals_have_no_gaps(self, any_catalog):
        """Test that every table's ordinals are exactly 1..N."""
        by_table = {}
        for r in any_catalog.records("COLUMNS"):
            by_table.setdefault((r["TABLE_SCHEMA"], r["TABLE_NAME"]), []).append(r["ORDINAL_POSITION"])

        for (schema_name, table_name), ordinals in by_table.items():
            if schema_name == "":
                expected = len(any_catalog.schema.get_table(table_name).columns)
            else:
                expected = any_catalog.get_table(table_name).num_columns
            assert ordinals == list(range(1, expected + 1))

    def test_every_table_listed(self, any_catalog):
        """Test that TABLES lists each user table and each relation once."""
        names = [(r["TABLE_SCHEMA"], r["TABLE_NAME"]) for r in any_catalog.records("TABLES")]

        assert names == [("", t.name) for t in any_catalog.schema.tables] + [
            (INFORMATION_SCHEMA, spec.name) for spec in VIEW_SPECS
        ]


class TestConstraintSynthesis:
    """Synthesized primary key and not-null constraints."""

    def test_one_primary_key_per_table(self, any_catalog):
        """Test exactly one PK_<table> primary key row per table."""
        counts = Counter(
            (r["TABLE_SCHEMA"], r["TABLE_NAME"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("TABLE_CONSTRAINTS")
            if r["CONSTRAINT_TYPE"] == "PRIMARY KEY"
        )
        tables = [("", t.name) for t in any_catalog.schema.tables] + [
            (INFORMATION_SCHEMA, spec.name) for spec in VIEW_SPECS
        ]

        assert counts == Counter((s, t, f"PK_{t}") for s, t in tables)

    def test_not_null_checks(self, any_catalog):
        """Test one check per non-nullable user column with a matching clause."""
        constraints = Counter(
            r["CONSTRAINT_NAME"]
            for r in any_catalog.records("TABLE_CONSTRAINTS")
            if r["CONSTRAINT_SCHEMA"] == "" and r["CONSTRAINT_TYPE"] == "CHECK"
        )
        clauses = {
            r["CONSTRAINT_NAME"]: r["CHECK_CLAUSE"] for r in any_catalog.records("CHECK_CONSTRAINTS")
        }

        for table in any_catalog.schema.tables:
            for column in table.columns:
                name = f"CK_IS_NOT_NULL_{table.name}_{column.name}"
                if column.is_nullable:
                    assert name not in constraints
                else:
                    assert constraints[name] == 1
                    assert clauses[name] == f"{column.name} IS NOT NULL"

    def test_primary_key_index_columns_in_key_order(self, any_catalog):
        """Test the PRIMARY_KEY index columns of each user table."""
        for table in any_catalog.schema.tables:
            rows = [
                (r["COLUMN_NAME"], r["ORDINAL_POSITION"])
                for r in any_catalog.records("INDEX_COLUMNS")
                if r["TABLE_SCHEMA"] == "" and r["TABLE_NAME"] == table.name
                and r["INDEX_NAME"] == "PRIMARY_KEY"
            ]
            assert rows == [(k.column.name, i) for i, k in enumerate(table.primary_key, start=1)]


class TestCrossRelationConsistency:
    """Every constraint shows up in the usage relations."""

    def test_constraints_have_table_usage(self, any_catalog):
        """Test that each named constraint appears in CONSTRAINT_TABLE_USAGE."""
        declared = {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("TABLE_CONSTRAINTS")
        }
        used = {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("CONSTRAINT_TABLE_USAGE")
        }

        assert declared == used

    def test_constraints_have_column_usage(self, any_catalog):
        """Test that each named constraint touches at least one column."""
        declared = {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("TABLE_CONSTRAINTS")
        }
        used = {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("CONSTRAINT_COLUMN_USAGE")
        }

        assert declared == used

    def test_checks_are_table_constraints(self, any_catalog):
        """Test that every CHECK_CONSTRAINTS row is a CHECK table constraint."""
        checks = {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("TABLE_CONSTRAINTS")
            if r["CONSTRAINT_TYPE"] == "CHECK"
        }

        assert checks == {
            (r["CONSTRAINT_SCHEMA"], r["CONSTRAINT_NAME"])
            for r in any_catalog.records("CHECK_CONSTRAINTS")
        }

    def test_unique_constraints_exist(self, any_catalog):
        """Test that every referenced unique constraint is a table constraint."""
        declared = {r["CONSTRAINT_NAME"] for r in any_catalog.records("TABLE_CONSTRAINTS")}

        for r in any_catalog.records("REFERENTIAL_CONSTRAINTS"):
            assert r["UNIQUE_CONSTRAINT_NAME"] in declared

    def test_key_columns_are_columns(self, any_catalog):
        """Test that every key column usage row names a described column."""
        columns = {
            (r["TABLE_SCHEMA"], r["TABLE_NAME"], r["COLUMN_NAME"])
            for r in any_catalog.records("COLUMNS")
        }

        for r in any_catalog.records("KEY_COLUMN_USAGE"):
            assert (r["TABLE_SCHEMA"], r["TABLE_NAME"], r["COLUMN_NAME"]) in columns
