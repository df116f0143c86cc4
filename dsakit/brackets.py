"""Bracket balance checking with a nesting order: ``[`` outside ``{`` outside ``(``."""

from __future__ import annotations

_OPENING = "[{("
_CLOSING = "]})"
_PRECEDENCE = {"[": 1, "]": 1, "{": 2, "}": 2, "(": 3, ")": 3}


def bracket_precedence(char: str) -> int:
    """Nesting rank of a bracket: 1 for square, 2 for curly, 3 for round, 0 otherwise."""
    return _PRECEDENCE.get(char, 0)


def is_open_bracket(char: str) -> bool:
    """Return whether ``char`` is an opening bracket."""
    return len(char) == 1 and char in _OPENING


def is_closing_bracket(char: str) -> bool:
    """Return whether ``char`` is a closing bracket."""
    return len(char) == 1 and char in _CLOSING


def are_brackets_balanced(expression: str) -> bool:
    """Return whether the brackets in ``expression`` match and nest in order.

    An opening bracket may only appear inside one of equal or lower rank, so
    round brackets may hold nothing but round brackets. Other characters are
    ignored.
    """
    stack: list[str] = []
    for char in expression:
        if is_open_bracket(char):
            if stack and bracket_precedence(char) < bracket_precedence(stack[-1]):
                return False
            stack.append(char)
        elif is_closing_bracket(char):
            if not stack or bracket_precedence(stack[-1]) != bracket_precedence(char):
                return False
            stack.pop()
    return not stack