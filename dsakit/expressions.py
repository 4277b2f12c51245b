"""Bracket matching and infix to postfix conversion."""

from __future__ import annotations

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())
_PRECEDENCE = {"+": 2, "-": 2, "*": 3, "/": 3}


def parenthesis_match(exp: str) -> bool:
    """True if the round parentheses in exp are balanced; other characters are ignored."""
    depth = 0
    for ch in exp:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def matches(opening: str, closing: str) -> bool:
    """True if closing is the bracket that closes opening."""
    return _PAIRS.get(opening) == closing


def brackets_match(exp: str) -> bool:
    """True if (), [] and {} in exp are balanced and properly nested."""
    stack: list[str] = []
    for ch in exp:
        if ch in _PAIRS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or not matches(stack.pop(), ch):
                return False
    return not stack


def precedence(ch: str) -> int:
    """Binding strength of an operator: 3 for * and /, 2 for + and -, else 0."""
    return _PRECEDENCE.get(ch, 0)


def is_operator(ch: str) -> bool:
    """True for the four arithmetic operators."""
    return ch in _PRECEDENCE


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in infix:
        if not is_operator(ch):
            output.append(ch)
            continue
        while stack and precedence(ch) <= precedence(stack[-1]):
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)