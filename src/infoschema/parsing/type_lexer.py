"""Lexer for column type text."""

import ply.lex as lex


class TypeLexer:
    """Lexer for tokenizing column type text such as ``ARRAY<STRING(MAX)>``."""

    # Reserved keywords, matched case-insensitively
    reserved = {
        "ARRAY": "ARRAY",
        "MAX": "MAX",
    }

    # Token list
    tokens = [
        "IDENTIFIER",
        "INTEGER",
        "LPAREN",
        "RPAREN",
        "LANGLE",
        "RANGLE",
    ] + list(reserved.values())

    # Simple tokens
    t_LPAREN = r"\("
    t_RPAREN = r"\)"
    t_LANGLE = r"<"
    t_RANGLE = r">"

    # Ignored characters
    t_ignore = " \t\n"

    def __init__(self) -> None:
        self.lexer: lex.Lexer = None  # type: ignore

    def t_INTEGER(self, t: lex.LexToken) -> lex.LexToken:
        r"\d+"
        t.value = int(t.value)
        return t

    def t_IDENTIFIER(self, t: lex.LexToken) -> lex.LexToken:
        r"[a-zA-Z_][a-zA-Z0-9_]*"
        t.value = t.value.upper()
        t.type = self.reserved.get(t.value, "IDENTIFIER")
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at position {t.lexpos}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
