"""Infix to postfix conversion and evaluation of single-digit postfix expressions."""

from __future__ import annotations

__all__ = ["ExpressionError", "precedence", "infix_to_postfix", "evaluate_postfix"]

_OPERATORS = frozenset("+-*/^")
_RIGHT_ASSOCIATIVE = frozenset("^")


class ExpressionError(ValueError):
    """Raised for a malformed expression."""


def precedence(operator: str) -> int:
    """Return the binding strength of operator; 0 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return 0


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; ``^`` is right-associative.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif char in _OPERATORS:
            while (
                stack
                and char not in _RIGHT_ASSOCIATIVE
                and precedence(char) <= precedence(stack[-1])
            ):
                output.append(stack.pop())
            stack.append(char)
        else:
            raise ExpressionError(f"unexpected character {char!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ZeroDivisionError("cannot divide")
    return int(base**exponent)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("cannot divide")
        return _truncating_div(left, right)
    return _power(left, right)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression whose operands are single digits.

    Division truncates toward zero. The value on top of the stack at the
    end is the result.
    """
    stack: list[int] = []
    for char in expression:
        if char.isascii() and char.isdigit():
            stack.append(int(char))
            continue
        if char not in _OPERATORS:
            raise ExpressionError(f"invalid operator {char!r}")
        if len(stack) < 2:
            raise ExpressionError(f"not enough operands for {char!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(_apply(char, left, right))
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]