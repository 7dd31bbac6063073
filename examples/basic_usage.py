#!/usr/bin/env python3
"""
Basic Usage Example - Pair Actions

This script walks through the common ways of using a pair action:
- Iterating over a mapping
- Handling an exception inside the action
- Updating a list in place
- Chaining two actions with and_then
- Using the same helpers with different value types

Run: python examples/basic_usage.py
"""

from pair_actions import and_then, pair_action
from pair_actions.library import concat, print_pair, replace_at, safe_divide
from pair_actions.logging import configure_logging
from pair_actions.utils import for_each_entry


def main() -> None:
    configure_logging(level="INFO", include_timestamp=False)

    print("1. Iterating over a mapping:")
    ages = {"Alice": 30, "Bob": 25, "Carol": 41}
    for_each_entry(ages, print_pair("   {a} is {b} years old", emit=print))
    print()

    print("2. Handling division by zero inside the action:")
    divide = safe_divide(lambda value: print(f"   result: {value}"))
    divide.apply(10, 2)
    divide.apply(5, 0)
    print()

    print("3. Updating a list:")
    names = ["John", "Jane", "Doe"]
    replace_at(names).apply(1, "Janet")
    print(f"   {names}")
    print()

    print("4. Chaining two actions:")

    @pair_action
    def show_sum(a: int, b: int) -> None:
        print(f"   sum: {a + b}")

    @pair_action
    def show_product(a: int, b: int) -> None:
        print(f"   product: {a * b}")

    and_then(show_sum, show_product).apply(3, 4)
    print()

    print("5. Different value types:")
    concat(lambda value: print(f"   {value}")).apply("Hello", "World")
    concat(lambda value: print(f"   {value}")).apply([1, 2], [3])


if __name__ == "__main__":
    main()
