"""Pick an arithmetic operation by number and apply it to two integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence


def add(a: int, b: int) -> int:
    return a + b


def subtract(a: int, b: int) -> int:
    return a - b


def multiply(a: int, b: int) -> int:
    return a * b


def divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("Division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


OPERATIONS: dict[str, tuple[str, Callable[[int, int], int]]] = {
    "0": ("Adding 'a' and 'b'", add),
    "1": ("Subtracting 'b' from 'a'", subtract),
    "2": ("Multiplying 'a' and 'b'", multiply),
    "3": ("Dividing 'a' by 'b'", divide),
}
EXIT_CHOICE = "4"


def perform(choice: str, a: int, b: int) -> int:
    """Apply the operation numbered ``choice`` ('0' to '3')."""
    try:
        _, operation = OPERATIONS[choice]
    except KeyError:
        raise ValueError(f"unknown operation: {choice!r}") from None
    return operation(a, b)


def _read_choice(stream) -> str | None:
    for line in stream:
        stripped = line.strip()
        if stripped:
            return stripped[0]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Apply an operation to two integers.")
    parser.add_argument("--a", type=int, default=6)
    parser.add_argument("--b", type=int, default=3)
    args = parser.parse_args(argv)
    a, b = args.a, args.b

    print(f"Operand 'a' : {a} | Operand 'b' : {b}")
    print(
        "Specify the operation to perform (0 : add | 1 : subtract | "
        "2 : Multiply | 3 : divide | 4 : exit): ",
        end="",
        flush=True,
    )
    choice = _read_choice(sys.stdin)
    if choice in OPERATIONS:
        message, _ = OPERATIONS[choice]
        try:
            result = perform(choice, a, b)
        except ZeroDivisionError:
            print("Error: Division by zero")
            result = 0
        else:
            print(message)
        print(f"Result: {result}")
    elif choice == EXIT_CHOICE:
        print("Exiting program")
    return 0


if __name__ == "__main__":
    sys.exit(main())