# =============================================================================
# core/arithmetic.py  —  The math server's business logic
# =============================================================================
#
# Two integer operations.  The MCP layer already validates argument types
# against the tool schema, but these functions are also called directly
# (tests, the smoke-test client, other Python code), so they check their
# inputs themselves.
#
# bool is a subclass of int in Python, so isinstance(True, int) is True.
# A JSON caller sending `true` for a number is a mistake, not a 1.
# =============================================================================


def _check_operands(a: int, b: int) -> None:
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Expected an integer operand, got {type(value).__name__}: {value!r}"
            )


def add(a: int, b: int) -> int:
    """Return the sum of two integers.

    >>> add(1, 2)
    3
    """
    _check_operands(a, b)
    return a + b


def subtract(a: int, b: int) -> int:
    """Return ``a - b``.

    >>> subtract(5, 3)
    2
    """
    _check_operands(a, b)
    return a - b
