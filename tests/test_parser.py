"""Tests for the column type parser."""

import pytest

from infoschema.parsing import ParsedType, TypeParser
from infoschema.parsing.type_lexer import TypeLexer
from infoschema.types import ColumnType, TypeCode


class TestTypeLexer:
    """Tests for the type lexer."""

    def test_tokenize_sized_string(self):
        """Test tokenizing a sized scalar."""
        lexer = TypeLexer()
        lexer.build()

        tokens = lexer.tokenize("STRING(100)")
        token_types = [t.type for t in tokens]

        assert token_types == ["IDENTIFIER", "LPAREN", "INTEGER", "RPAREN"]
        assert tokens[2].value == 100

    def test_tokenize_array(self):
        """Test tokenizing an array type."""
        lexer = TypeLexer()
        lexer.build()

        tokens = lexer.tokenize("ARRAY<STRING(MAX)>")
        token_types = [t.type for t in tokens]

        assert token_types == [
            "ARRAY",
            "LANGLE",
            "IDENTIFIER",
            "LPAREN",
            "MAX",
            "RPAREN",
            "RANGLE",
        ]

    def test_keywords_case_insensitive(self):
        """Test that keywords and identifiers are upper-cased."""
        lexer = TypeLexer()
        lexer.build()

        tokens = lexer.tokenize("array<string(max)>")

        assert tokens[0].type == "ARRAY"
        assert tokens[2].value == "STRING"
        assert tokens[4].type == "MAX"

    def test_illegal_character(self):
        """Test that illegal characters raise SyntaxError."""
        lexer = TypeLexer()
        lexer.build()

        with pytest.raises(SyntaxError):
            lexer.tokenize("STRING[10]")


class TestTypeParser:
    """Tests for the type parser."""

    def test_parse_scalar(self):
        """Test parsing a plain scalar."""
        parser = TypeParser()
        result = parser.parse("INT64")

        assert result == ParsedType(ColumnType(TypeCode.INT64))

    def test_parse_string_max(self):
        """Test that MAX gives no declared length."""
        parser = TypeParser()
        result = parser.parse("STRING(MAX)")

        assert result.column_type.code is TypeCode.STRING
        assert result.max_length is None
        assert result.render() == "STRING(MAX)"

    def test_parse_sized_lowercase(self):
        """Test parsing lower-case text with a length."""
        parser = TypeParser()
        result = parser.parse("string(100)")

        assert result.max_length == 100
        assert result.render() == "STRING(100)"

    def test_parse_array(self):
        """Test parsing an array type."""
        parser = TypeParser()
        result = parser.parse("ARRAY<BYTES(16)>")

        assert result.column_type.is_array
        assert result.column_type.element == ColumnType(TypeCode.BYTES)
        assert result.render() == "ARRAY<BYTES(16)>"

    def test_parse_with_whitespace(self):
        """Test that whitespace is ignored."""
        parser = TypeParser()

        assert parser.parse(" ARRAY < INT64 > ").render() == "ARRAY<INT64>"

    def test_parser_is_reusable(self):
        """Test parsing several texts with one parser."""
        parser = TypeParser()

        assert parser.parse("BOOL").render() == "BOOL"
        assert parser.parse("STRING(10)").render() == "STRING(10)"
        assert parser.parse("DATE").render() == "DATE"

    def test_unknown_type(self):
        """Test that unknown type names raise ValueError."""
        parser = TypeParser()
        with pytest.raises(ValueError, match="Unknown column type"):
            parser.parse("VARCHAR(10)")

    def test_length_required(self):
        """Test that STRING and BYTES need a length."""
        parser = TypeParser()
        with pytest.raises(ValueError, match="requires a length"):
            parser.parse("STRING")

    def test_length_not_allowed(self):
        """Test that other types do not take a length."""
        parser = TypeParser()
        with pytest.raises(ValueError, match="does not take a length"):
            parser.parse("INT64(8)")

    def test_length_must_be_positive(self):
        """Test that a zero length is rejected."""
        parser = TypeParser()
        with pytest.raises(ValueError, match="must be positive"):
            parser.parse("BYTES(0)")

    def test_nested_array_is_syntax_error(self):
        """Test that arrays of arrays do not parse."""
        parser = TypeParser()
        with pytest.raises(SyntaxError):
            parser.parse("ARRAY<ARRAY<INT64>>")

    def test_unclosed_array(self):
        """Test that a missing closing bracket is a syntax error."""
        parser = TypeParser()
        with pytest.raises(SyntaxError):
            parser.parse("ARRAY<INT64")

    def test_empty_text(self):
        """Test that empty text is a syntax error."""
        parser = TypeParser()
        with pytest.raises(SyntaxError):
            parser.parse("")
