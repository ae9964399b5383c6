"""robots_scout.parser: Tokenizer and rule parser for robots.txt."""

from robots_scout.parser.lexer import Token, TokenKind, lex, tokenize
from robots_scout.parser.rules import RuleParser, from_reader, parse

__all__ = ["Token", "TokenKind", "lex", "tokenize", "RuleParser", "parse", "from_reader"]
