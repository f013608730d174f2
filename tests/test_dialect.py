from __future__ import annotations

import unittest

from micro.dialect import CLASSIC, FULL, Dialect, available_dialects, get_dialect, register_dialect
from micro.errors import DialectError
from micro.lexer import tokenize
from micro.tokens import TokenType


class DialectTests(unittest.TestCase):
    def test_builtin_dialects_are_registered(self) -> None:
        self.assertIn("classic", available_dialects())
        self.assertIn("full", available_dialects())
        self.assertIs(get_dialect("classic"), CLASSIC)
        self.assertIs(get_dialect(FULL), FULL)

    def test_unknown_dialect(self) -> None:
        with self.assertRaises(DialectError) as ctx:
            get_dialect("nope")
        self.assertEqual(ctx.exception.code, "DIA001")
        self.assertIn("classic", ctx.exception.hint)

    def test_classic_shape(self) -> None:
        self.assertEqual(set(CLASSIC.symbols), set("=+-*/:.<>"))
        self.assertFalse(CLASSIC.operators)
        self.assertEqual(set(CLASSIC.keywords), {"let", "in", "where"})
        self.assertFalse(CLASSIC.booleans)
        self.assertEqual(CLASSIC.max_integer, 2**63 - 1)
        self.assertEqual(CLASSIC.min_integer, -(2**63))

    def test_operator_must_extend_a_symbol(self) -> None:
        with self.assertRaises(DialectError) as ctx:
            Dialect(name="broken", symbols={"<": TokenType.LT}, operators={"==": TokenType.EQ})
        self.assertEqual(ctx.exception.code, "DIA004")

    def test_symbols_must_be_single_characters(self) -> None:
        with self.assertRaises(DialectError) as ctx:
            Dialect(name="broken", symbols={"<=": TokenType.LE})
        self.assertEqual(ctx.exception.code, "DIA002")

    def test_dialects_are_hashable(self) -> None:
        self.assertEqual(len({CLASSIC, FULL, CLASSIC}), 2)
        self.assertEqual({FULL: "default"}[get_dialect("full")], "default")

    def test_keywords_cannot_shadow_booleans(self) -> None:
        with self.assertRaises(DialectError) as ctx:
            Dialect(
                name="shadow",
                symbols={"=": TokenType.ASSIGN},
                keywords={"true": TokenType.LET},
                booleans=True,
            )
        self.assertEqual(ctx.exception.code, "DIA007")

    def test_custom_integer_width(self) -> None:
        tiny = Dialect(name="tiny", symbols={"+": TokenType.PLUS}, integer_bits=8)
        self.assertEqual(tokenize("127", tiny)[0].value, 127)
        self.assertEqual(tokenize("128", tiny)[0].token_type, TokenType.ILLEGAL)
        self.assertEqual(tokenize("1+2", tiny)[1].token_type, TokenType.PLUS)

    def test_register_rejects_duplicates(self) -> None:
        custom = Dialect(name="test-register", symbols={"+": TokenType.PLUS})
        register_dialect(custom, replace=True)
        self.assertIs(get_dialect("test-register"), custom)
        with self.assertRaises(DialectError) as ctx:
            register_dialect(custom)
        self.assertEqual(ctx.exception.code, "DIA006")

    def test_to_dict(self) -> None:
        payload = CLASSIC.to_dict()
        self.assertEqual(payload["name"], "classic")
        self.assertEqual(payload["keywords"], ["in", "let", "where"])
        self.assertEqual(payload["integer_bits"], 64)


if __name__ == "__main__":
    unittest.main()
