"""Tests for view tables and row shape checking."""

import pytest

from infoschema.errors import RowShapeError, ViewTableError
from infoschema.types import Value, ValueType
from infoschema.view_table import ViewTable


def _table():
    return ViewTable(
        "T",
        [("NAME", ValueType.STRING), ("POS", ValueType.INT64), ("FLAG", ValueType.BOOL)],
    )


class TestViewTableSchema:
    """Tests for the column schema."""

    def test_columns(self):
        """Test column names and lookup."""
        table = _table()

        assert table.column_names == ["NAME", "POS", "FLAG"]
        assert table.num_columns == 3
        assert table.find_column("POS").type is ValueType.INT64
        assert table.find_column("pos") is None

    def test_duplicate_column(self):
        """Test that column names must be unique."""
        with pytest.raises(ViewTableError, match="Duplicate column"):
            ViewTable("T", [("A", ValueType.STRING), ("A", ValueType.INT64)])


class TestMakeRow:
    """Tests for building typed rows."""

    def test_python_values(self):
        """Test converting Python scalars to typed values."""
        row = _table().make_row(["a", 1, True])

        assert row == (Value.string("a"), Value.int64(1), Value.bool_(True))

    def test_none_becomes_typed_null(self):
        """Test that None turns into a null of the column's type."""
        row = _table().make_row([None, None, None])

        assert row == (
            Value.null(ValueType.STRING),
            Value.null(ValueType.INT64),
            Value.null(ValueType.BOOL),
        )

    def test_value_instances(self):
        """Test that Value instances of the right type are kept."""
        row = _table().make_row([Value.string("x"), Value.null(ValueType.INT64), False])

        assert row[1].is_null
        assert row[1].type is ValueType.INT64

    def test_wrong_arity(self):
        """Test that rows must match the column count."""
        with pytest.raises(RowShapeError, match="has 2 values, expected 3"):
            _table().make_row(["a", 1])

    def test_wrong_type(self):
        """Test that scalars must match the column type."""
        with pytest.raises(RowShapeError, match="T.POS"):
            _table().make_row(["a", "1", True])

    def test_bool_is_not_int(self):
        """Test that a bool cannot fill an INT64 column."""
        with pytest.raises(RowShapeError):
            _table().make_row(["a", True, True])

    def test_wrong_value_type(self):
        """Test that a Value of another type is rejected."""
        with pytest.raises(RowShapeError):
            _table().make_row(["a", Value.null(ValueType.STRING), True])


class TestRows:
    """Tests for filling a view table."""

    def test_set_rows(self):
        """Test filling and reading rows."""
        table = _table()
        table.set_rows([("a", 1, True), ("b", None, False)])

        assert table.is_filled
        assert len(table.rows) == 2
        assert table.records() == [
            {"NAME": "a", "POS": 1, "FLAG": True},
            {"NAME": "b", "POS": None, "FLAG": False},
        ]

    def test_set_rows_from_generator(self):
        """Test filling from a generator."""
        table = _table()
        table.set_rows((name, i, False) for i, name in enumerate("xyz"))

        assert [r["POS"] for r in table.records()] == [0, 1, 2]

    def test_rows_set_once(self):
        """Test that rows cannot be replaced."""
        table = _table()
        table.set_rows([])
        with pytest.raises(ViewTableError, match="already set"):
            table.set_rows([])

    def test_rows_before_fill(self):
        """Test that reading rows before filling fails."""
        table = _table()

        assert not table.is_filled
        with pytest.raises(ViewTableError, match="not set yet"):
            _ = table.rows

    def test_bad_row_leaves_table_unfilled(self):
        """Test that a failed fill does not leave partial rows behind."""
        table = _table()
        with pytest.raises(RowShapeError):
            table.set_rows([("a", 1, True), ("b",)])

        assert not table.is_filled
