"""Parser for column type text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import ply.yacc as yacc

from infoschema.parsing.type_lexer import TypeLexer
from infoschema.types import SCALAR_TYPE_NAMES, ColumnType


@dataclass(frozen=True)
class ParsedType:
    """A column type together with its declared maximum length (None = MAX)."""

    column_type: ColumnType
    max_length: int | None = None

    def render(self) -> str:
        return self.column_type.render(self.max_length)


@dataclass
class _ScalarSpec:
    """Scalar type before resolution."""

    name: str
    has_length: bool = False
    length: int | None = None  # None means MAX when has_length is set


class TypeParser:
    """Parser for column type text.

    Grammar::

        type_expr   : scalar | ARRAY LANGLE scalar RANGLE
        scalar      : IDENTIFIER | IDENTIFIER LPAREN length RPAREN
        length      : INTEGER | MAX
    """

    tokens = TypeLexer.tokens

    def __init__(self) -> None:
        self.lexer = TypeLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_type_expr_scalar(self, p: yacc.YaccProduction) -> None:
        """type_expr : scalar"""
        p[0] = (False, p[1])

    def p_type_expr_array(self, p: yacc.YaccProduction) -> None:
        """type_expr : ARRAY LANGLE scalar RANGLE"""
        p[0] = (True, p[3])

    def p_scalar_plain(self, p: yacc.YaccProduction) -> None:
        """scalar : IDENTIFIER"""
        p[0] = _ScalarSpec(name=p[1])

    def p_scalar_sized(self, p: yacc.YaccProduction) -> None:
        """scalar : IDENTIFIER LPAREN length RPAREN"""
        p[0] = _ScalarSpec(name=p[1], has_length=True, length=p[3])

    def p_length_integer(self, p: yacc.YaccProduction) -> None:
        """length : INTEGER"""
        p[0] = p[1]

    def p_length_max(self, p: yacc.YaccProduction) -> None:
        """length : MAX"""
        p[0] = None

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (position {p.lexpos})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, **kwargs)

    def parse(self, data: str) -> ParsedType:
        """Parse type text and return the resolved column type."""
        if self.parser is None:
            self.build(debug=False, write_tables=False)

        result = self.parser.parse(data, lexer=self.lexer.lexer)
        if result is None:
            raise SyntaxError("Empty type text")
        is_array, spec = result

        element = self._resolve_scalar(spec)
        column_type = ColumnType.array_of(element) if is_array else element
        return ParsedType(column_type=column_type, max_length=spec.length)

    def _resolve_scalar(self, spec: _ScalarSpec) -> ColumnType:
        code = SCALAR_TYPE_NAMES.get(spec.name)
        if code is None:
            raise ValueError(f"Unknown column type '{spec.name}'")
        if spec.has_length != code.has_length:
            if code.has_length:
                raise ValueError(f"Type {spec.name} requires a length, e.g. {spec.name}(MAX)")
            raise ValueError(f"Type {spec.name} does not take a length")
        if spec.length is not None and spec.length <= 0:
            raise ValueError(f"Length of {spec.name} must be positive, got {spec.length}")
        return ColumnType(code)
