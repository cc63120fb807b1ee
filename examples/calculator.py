"""Calculator Example - Lexing and Parsing Arithmetic.

CORE ONLY: This example works WITHOUT Babel. Install with:
    pip install lexcursor  (no [babel] extra needed)

Demonstrates the two halves of lexcursor working together:

1. Define a PatternLexer from (pattern, handler) rules
2. Lex source text into tokens
3. Parse tokens into a tree with TokenCursor.parse()
4. Evaluate the tree
5. Report lex and parse errors with diagnostics

The grammar has no operator precedence: every operator takes the number
on its left and the whole rest of the expression on its right, so
"5 * 6 + 2" evaluates as 5 * (6 + 2) = 40.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from lexcursor import (
    GrammarError,
    LexError,
    ParseError,
    ParseResult,
    PatternLexer,
    TokenCursor,
)
from lexcursor.lexer.handlers import convert, emit, ignore


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True, slots=True)
class Num:
    value: float


@dataclass(frozen=True, slots=True)
class Binary:
    op: Op
    lhs: Num
    rhs: Num | Binary


type Token = Op | Num
type Expr = Num | Binary


def build_lexer() -> PatternLexer[Token]:
    """Whitespace, the four operators and signed decimals."""
    lexer: PatternLexer[Token] = PatternLexer()
    lexer.add_rule(r"\s+", ignore)
    for op in Op:
        lexer.add_rule(re.escape(op.value), emit(op))
    lexer.add_rule(r"-?[0-9]+(?:\.[0-9]+)?", convert(lambda text: Num(float(text))))
    return lexer


def parse_expr(cursor: TokenCursor[Token]) -> ParseResult[Expr]:
    """expr := NUM (OP expr)?"""
    lhs = cursor.consume()
    if not isinstance(lhs, Num):
        raise GrammarError(f"Expected a number, found {lhs!r}")
    if cursor.is_consumed:
        return cursor.result(lhs)

    op = cursor.consume_matching(lambda token: isinstance(token, Op))
    assert isinstance(op, Op)
    return cursor.result(Binary(op, lhs, cursor.parse(parse_expr)))


def evaluate(expr: Expr) -> float:
    """Evaluate a tree produced by parse_expr."""
    match expr:
        case Num(value=value):
            return value
        case Binary(op=Op.ADD, lhs=lhs, rhs=rhs):
            return evaluate(lhs) + evaluate(rhs)
        case Binary(op=Op.SUB, lhs=lhs, rhs=rhs):
            return evaluate(lhs) - evaluate(rhs)
        case Binary(op=Op.MUL, lhs=lhs, rhs=rhs):
            return evaluate(lhs) * evaluate(rhs)
        case Binary(op=Op.DIV, lhs=lhs, rhs=rhs):
            return evaluate(lhs) / evaluate(rhs)
    msg = f"Unknown expression {expr!r}"
    raise TypeError(msg)


def example_1_lexing(lexer: PatternLexer[Token]) -> None:
    """Lex source text and show tokens with their spans."""
    print("=" * 60)
    print("Example 1: Lexing")
    print("=" * 60)

    for lexeme in lexer.tokenize("12 + 3.5 * -2"):
        print(f"  [{lexeme.start:2}, {lexeme.end:2})  {lexeme.text!r:8} -> {lexeme.value!r}")
    print()


def example_2_parsing(lexer: PatternLexer[Token]) -> None:
    """Parse and evaluate expressions."""
    print("=" * 60)
    print("Example 2: Parsing and Evaluation")
    print("=" * 60)

    for source in ("5 + 6 - 2", "5 * 6 + 2", "1.5 / -2"):
        cursor = TokenCursor(lexer.lex(source))
        tree = cursor.parse(parse_expr)
        print(f"  {source:12} => {evaluate(tree):g}")
        print(f"  {'':12}    {tree}")
    print()


def example_3_errors(lexer: PatternLexer[Token]) -> None:
    """Show diagnostics for lex and parse failures."""
    print("=" * 60)
    print("Example 3: Error Reporting")
    print("=" * 60)

    for source in ("5 & 6", "+ 5", "5 +"):
        try:
            cursor = TokenCursor(lexer.lex(source))
            cursor.parse(parse_expr)
        except (LexError, ParseError) as e:
            print(f"  {source!r}:")
            if e.diagnostic is not None:
                for line in e.diagnostic.format_error().splitlines():
                    print(f"    {line}")
            else:
                print(f"    {e}")
    print()


def main() -> None:
    """Run all calculator examples."""
    lexer = build_lexer()

    example_1_lexing(lexer)
    example_2_parsing(lexer)
    example_3_errors(lexer)

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
