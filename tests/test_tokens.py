from __future__ import annotations

import unittest

from micro.tokens import KEYWORDS, OPERATORS, SYMBOLS, Token, TokenType


class TokenTests(unittest.TestCase):
    def test_debug_rendering(self) -> None:
        self.assertEqual(str(Token(TokenType.LET, 0, "let")), "Let(0)")
        self.assertEqual(str(Token(TokenType.IDENTIFIER, 4, "x", "x")), "Identifier(4, 'x')")
        self.assertEqual(str(Token(TokenType.INTEGER, 8, "10", 10)), "Integer(8, 10)")
        self.assertEqual(str(Token(TokenType.BOOLEAN, 0, "true", True)), "Boolean(0, True)")
        self.assertEqual(str(Token(TokenType.ILLEGAL, 3, "?")), "Illegal(3)")
        self.assertEqual(str(Token(TokenType.EOF, 10)), "EndOfFile(10)")

    def test_every_type_has_a_label(self) -> None:
        for token_type in TokenType:
            with self.subTest(token_type=token_type):
                self.assertTrue(token_type.label)

    def test_end_and_predicates(self) -> None:
        token = Token(TokenType.LE, 5, "<=")
        self.assertEqual(token.end, 7)
        self.assertFalse(token.is_sentinel)
        self.assertFalse(token.is_keyword)
        self.assertTrue(Token(TokenType.EOF, 0).is_sentinel)
        self.assertTrue(Token(TokenType.ILLEGAL, 0, "?").is_sentinel)
        self.assertTrue(Token(TokenType.WHERE, 0, "where").is_keyword)

    def test_to_dict_omits_missing_value(self) -> None:
        self.assertEqual(
            Token(TokenType.ASSIGN, 2, "=").to_dict(),
            {"type": "ASSIGN", "position": 2, "text": "="},
        )
        self.assertEqual(
            Token(TokenType.INTEGER, 0, "42", 42).to_dict(),
            {"type": "INTEGER", "position": 0, "text": "42", "value": 42},
        )

    def test_tables_are_consistent(self) -> None:
        self.assertTrue(all(len(spelling) == 1 for spelling in SYMBOLS))
        self.assertTrue(all(spelling[0] in SYMBOLS for spelling in OPERATORS))
        self.assertEqual(set(KEYWORDS), {"let", "in", "where", "if", "then", "else"})


if __name__ == "__main__":
    unittest.main()
