"""Command line entry point that runs every demonstration in turn."""

from __future__ import annotations

import argparse

from algodemos import (
    basics,
    competitive,
    concurrency,
    graph,
    linked_list,
    searching,
    sorting,
    trees,
    webdev,
)
from algodemos.containers import Queue, Stack


def _go_format(value) -> str:
    """Render a value the way the demonstrations print it: lowercase booleans, bracketed lists."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_format(item) for item in value) + "]"
    return str(value)


def _non_negative(text: str) -> float:
    try:
        value = float(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"not a number: {text}") from err
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {text}")
    return value


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"not a port number: {text}") from err
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {text}")
    return value


def _queue_demo() -> None:
    items = Queue()
    for item in (10, 20, 30):
        items.enqueue(item)
    print("Queue size:", len(items))
    print("Front element:", items.peek())
    print("Dequeued element:", items.dequeue())
    print("Is queue empty?", _go_format(items.is_empty()))


def _stack_demo() -> None:
    items = Stack()
    for item in (10, 20, 30):
        items.push(item)
    print("Stack size:", len(items))
    print("Top element:", items.peek())
    print("Popped element:", items.pop())
    print("Is stack empty?", _go_format(items.is_empty()))


def _competitive_demo() -> None:
    """Run the array, string and dynamic-programming problems with their headers."""
    print("Calling competetive problems...")
    pair = competitive.two_sum([2, 7, 11, 15], 9)
    print("Indices:", _go_format(list(pair or ())))
    nums = [1, 2, 3, 4, 5, 6, 7]
    competitive.rotate(nums, 3)
    print("Rotated array:", _go_format(nums))

    print("Calling Strings...")
    text = "abcabcbb"
    longest = competitive.length_of_longest_substring(text)
    print("Length of longest substring:", longest)

    print("Calling DP...")
    n = 10
    fib = competitive.fibonacci(n)
    print(f"Fibonacci of {n} (Recursive): {fib}")
    best = competitive.knapsack([2, 3, 4, 5], [3, 4, 5, 6], 5)
    print("Maximum value in Knapsack:", best)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algodemos",
        description="Run every demonstration, then start the HTTP server.",
    )
    parser.add_argument(
        "--port", type=_port, default=8080, help="port for the HTTP server (default 8080)"
    )
    parser.add_argument(
        "--no-serve",
        action="store_true",
        help="stop after the demonstrations instead of starting the server",
    )
    parser.add_argument(
        "--delay-scale",
        type=_non_negative,
        default=1.0,
        help="factor applied to the simulated work delays (default 1.0)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run all demonstrations in order; serve HTTP at the end unless told not to."""
    args = _build_parser().parse_args(argv)

    print("Calling loop functions...")
    basics.run_loops()

    print("Calling Pointer functions...")
    basics.run_pointers()

    print("Calling Functions...")
    basics.run_functions()

    print("Calling Variables...")
    basics.run_variables()

    print("Calling Graph...")
    graph.run_graphs()

    print("Calling Linked-list...")
    linked_list.run_linked_lists()

    print("Calling Queue...")
    _queue_demo()

    print("Calling Searching...")
    searching.run_searching()

    print("Calling Sorting...")
    sorting.run_sorting()

    print("Calling Stack...")
    _stack_demo()

    print("Calling Trees...")
    trees.run_trees()

    _competitive_demo()

    print("Calling Concurrency...")
    concurrency.goroutines_demo(0.5 * args.delay_scale)
    concurrency.channels_demo()
    concurrency.mutex_counter(5)
    concurrency.worker_pool(5, 3, 1.0 * args.delay_scale)

    if not args.no_serve:
        print("Calling Web-Dev...")
        webdev.serve("", args.port)
    return 0