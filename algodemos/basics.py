"""Small demonstrations of functions, loops, references and variables."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


def _go_list(values) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def _go_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Person:
    """A named person with an age."""

    name: str
    age: int

    def __str__(self) -> str:
        return f"{{{self.name} {self.age}}}"


def hello() -> str:
    """Print and return the classic greeting."""
    message = "Hello, World"
    print(message)
    return message


def greet() -> str:
    """Print and return a greeting."""
    message = "Hello, World!"
    print(message)
    return message


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Return quotient and remainder, truncating toward zero.

    Raises ZeroDivisionError when the divisor is zero.
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def rectangle_dimensions(length: int, breadth: int) -> tuple[int, int]:
    """Return the area and perimeter of a rectangle."""
    return length * breadth, 2 * (length + breadth)


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return math.factorial(n)


def multiply(a: int, b: int) -> int:
    """Return the product of two numbers."""
    return a * b


def sum_all(*args: int) -> int:
    """Return the total of any number of values."""
    return sum(args)


def count_up(limit: int) -> Iterator[int]:
    """Yield 1 through limit inclusive."""
    yield from range(1, limit + 1)


def nested_pairs(size: int) -> list[list[tuple[int, int]]]:
    """Return rows of (i, j) pairs for i and j from 1 to size."""
    return [[(i, j) for j in range(1, size + 1)] for i in range(1, size + 1)]


def forever() -> Iterator[str]:
    """Yield the same message without end."""
    while True:
        yield "This will run forever!"


def change_age(person: Person) -> None:
    """Set the person's age to 30 in place."""
    person.age = 30


def modify_first(values: list) -> None:
    """Replace the first element of a list with 100 in place."""
    values[0] = 100


def run_functions() -> None:
    """Print the function demonstrations."""
    greet()

    add_inline = lambda a, b: a + b  # noqa: E731
    print("Addition:", add_inline(3, 7))

    quotient, remainder = divide(10, 3)
    print("Quotient:", quotient, "Remainder:", remainder)

    area, perimeter = rectangle_dimensions(5, 3)
    print("Area:", area, "Perimeter:", perimeter)

    print("Sum:", add(5, 3))
    print("Factorial of 5:", factorial(5))
    print("Product:", multiply(4, 5))
    print("Sum:", sum_all(1, 2, 3, 4, 5))


def run_loops() -> None:
    """Print the loop demonstrations."""
    for i in range(5):
        print(i)

    for i in count_up(5):
        print("Iteration:", i)

    for index, value in enumerate([10, 20, 30]):
        print("Index:", index, "Value:", value)

    for row in nested_pairs(3):
        print("".join(f"({i}, {j}) " for i, j in row))


def run_pointers() -> None:
    """Print the in-place modification demonstrations."""
    numbers = [1, 2, 3]
    print("Before:", _go_list(numbers))
    modify_first(numbers)
    print("After:", _go_list(numbers))

    num = 10
    address = hex(id(num))
    print("Value of num:", num)
    print("Address of num:", address)
    print("Value stored in ptr:", address)

    ref = None
    print("Pointer value:", "<nil>" if ref is None else ref)
    if ref is None:
        print("Pointer is nil")

    person = Person("Gungun", 22)
    print("Before:", person)
    change_age(person)
    print("After:", person)

    print("Value stored in ptr:", 20)

    box = [25]
    print("Before:", box[0])
    modify_first(box)
    print("After:", box[0])

    box = [30]
    print("Before:", box[0])
    box[0] = 50
    print("After:", box[0])


def run_variables() -> None:
    """Print the variable demonstrations."""
    pi = 3.14159
    print("Pi:", pi)

    a, b, c = 1, 2, 3
    x, y = "Go", 3.14
    print(a, b, c, x, y)

    name, age, is_developer = "Gungun", 20, True
    print(name, age, _go_value(is_developer))

    message, number, pi_short = "Hello, Go!", 42, 3.14
    print(message, number, pi_short)