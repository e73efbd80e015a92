"""Integer infix expressions: conversion to postfix and evaluation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Category of a character or token in an infix expression."""

    OTHER = -1
    OPERAND = 0
    OPERATOR = 1
    LEFT_PAREN = 2
    RIGHT_PAREN = 3
    LETTER = 4
    SPACE = 5


@dataclass(frozen=True)
class Token:
    """An operand value, or the character code of an operator or parenthesis."""

    value: int
    kind: TokenType

    def __str__(self) -> str:
        if self.kind is TokenType.OPERAND:
            return str(self.value)
        return chr(self.value)


def token_type(c: str) -> TokenType:
    """Return the category of the character ``c``."""
    if "0" <= c <= "9":
        return TokenType.OPERAND
    if c in ("+", "-", "*", "/"):
        return TokenType.OPERATOR
    if c == "(":
        return TokenType.LEFT_PAREN
    if c == ")":
        return TokenType.RIGHT_PAREN
    if "A" <= c <= "Z" or "a" <= c <= "z":
        return TokenType.LETTER
    if c == " ":
        return TokenType.SPACE
    return TokenType.OTHER


def priority(op: str) -> int:
    """Return 1 for ``* / %``, 0 for ``+ -`` and -1 for anything else."""
    if op in ("/", "*", "%"):
        return 1
    if op in ("+", "-"):
        return 0
    return -1


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens separated by single spaces."""
    return " ".join(str(t) for t in tokens)


def infix_to_postfix(infixstr: str) -> list[Token]:
    """Convert an infix expression to a list of tokens in postfix order.

    Characters other than digits, ``+ - * /`` and parentheses are skipped.
    """
    output: list[Token] = []
    stack: list[Token] = []
    i = 0
    n = len(infixstr)
    while i < n:
        c = infixstr[i]
        kind = token_type(c)
        if kind is TokenType.OPERAND:
            start = i
            while i < n and "0" <= infixstr[i] <= "9":
                i += 1
            output.append(Token(int(infixstr[start:i]), TokenType.OPERAND))
            continue
        if kind is TokenType.LEFT_PAREN:
            stack.append(Token(ord(c), TokenType.LEFT_PAREN))
        elif kind is TokenType.RIGHT_PAREN:
            while stack and stack[-1].kind is not TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif kind is TokenType.OPERATOR:
            while stack and priority(chr(stack[-1].value)) >= priority(c):
                output.append(stack.pop())
            stack.append(Token(ord(c), TokenType.OPERATOR))
        i += 1
    output.extend(reversed(stack))
    return output


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def evaluate_postfix(postfix: Iterable[Token]) -> int:
    """Evaluate tokens in postfix order; parenthesis tokens are ignored.

    Division truncates toward zero. Raises ValueError if an operator lacks
    operands or there is no result, ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for token in postfix:
        if token.kind is TokenType.OPERAND:
            stack.append(token.value)
        elif token.kind is TokenType.OPERATOR:
            if len(stack) < 2:
                raise ValueError(f"missing operand for {chr(token.value)!r}")
            right = stack.pop()
            left = stack.pop()
            op = chr(token.value)
            if op == "+":
                result = left + right
            elif op == "-":
                result = left - right
            elif op == "*":
                result = left * right
            elif op == "/":
                result = _trunc_div(left, right)
            else:
                result = 0
            stack.append(result)
    if not stack:
        raise ValueError("expression has no value")
    return stack.pop()


def evaluate_infix(infixstr: str) -> int:
    """Evaluate an integer infix expression."""
    return evaluate_postfix(infix_to_postfix(infixstr))