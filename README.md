# algodemos

Small, self-contained demonstrations: language basics (functions, loops,
mutation through references, variables), classic data structures (linked
lists, a queue, a stack, graphs, binary trees), searching and sorting,
a few competitive-programming problems, thread-based concurrency patterns
and a minimal HTTP server. Everything uses the standard library only.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The `algodemos` command

`algodemos` runs every demonstration in turn, printing what each one does,
and finishes by starting the HTTP server:

```
algodemos
```

Options:

- `--port PORT`: port for the HTTP server (default 8080, range 0 to 65535).
- `--no-serve`: stop after the demonstrations instead of starting the server.
- `--delay-scale FACTOR`: non-negative factor applied to the simulated work
  delays in the thread demonstrations (default 1.0; `0` makes them instant).

```
algodemos --no-serve --delay-scale 0
algodemos --port 9000
```

The server answers every request, whatever the method or path, with
`Hello, you've hit <path>` as plain text. If the port cannot be bound the
command exits with status 1.

## Using the library

```python
from algodemos.sorting import merge_sort, quick_sort
from algodemos.searching import binary_search, linear_search
from algodemos.competitive import two_sum, knapsack, length_of_longest_substring
from algodemos.graph import Graph
from algodemos.containers import Stack, Queue

print(merge_sort([38, 27, 43, 3, 9, 82, 10]))      # [3, 9, 10, 27, 38, 43, 82]
print(two_sum([2, 7, 11, 15], 9))                  # (0, 1)
print(knapsack([2, 3, 4, 5], [3, 4, 5, 6], 5))     # 7
print(length_of_longest_substring("abcabcbb"))     # 3

g = Graph()
g.add_edge(0, 1)
g.add_edge(0, 2)
print(g.bfs(0))                                    # [0, 1, 2]

stack = Stack()
stack.push(10)
print(stack.pop())                                 # 10
```

### Modules

- `algodemos.basics`: `hello`, `greet`, `add`, `divide` (quotient and
  remainder truncated toward zero), `rectangle_dimensions`, `factorial`,
  `multiply`, `sum_all`, the generators `count_up` and `forever`,
  `nested_pairs`, the `Person` dataclass with `change_age`, `modify_first`,
  and the printing demos `run_functions`, `run_loops`, `run_pointers`,
  `run_variables`.
- `algodemos.competitive`: `rotate` (in place, right by k), `two_sum`
  (index pair or `None`), `length_of_longest_substring`, `fibonacci`,
  `knapsack` (0/1), and `run_competitive`.
- `algodemos.graph`: `Graph`, undirected, with `add_edge` and `bfs`;
  `DirectedGraph` with `add_edge` and `dfs`, which remembers visited nodes
  across calls; and `run_graphs`.
- `algodemos.linked_list`: `SinglyLinkedList` and `DoublyLinkedList`, both
  iterable and supporting `len` and `in`, with `insert_at_end`,
  `insert_at_beginning` and `delete` (returns whether a node was removed);
  `display`, `display_forward` and `display_backward` return the drawn list
  as a string. `run_linked_lists` prints the examples.
- `algodemos.containers`: `Queue` (`enqueue`, `dequeue`, `peek`,
  `is_empty`) and `Stack` (`push`, `pop`, `peek`, `is_empty`); both support
  `len` and raise `IndexError` when taking from an empty container.
  `run_containers` prints the examples.
- `algodemos.searching`: `binary_search` over a sorted list and
  `linear_search`, each returning an index or -1; `run_searching`.
- `algodemos.sorting`: `bubble_sort` and `quick_sort` sort in place;
  `merge_sort` returns a new list; `run_sorting`.
- `algodemos.trees`: `BinaryTree` (`insert`, `in_order`, `pre_order`,
  `post_order`) and `BST` (`insert`, `in_order`); both are iterable in
  sorted order and support `len` and `in`. `run_trees` prints the examples.
- `algodemos.concurrency`: `send_message`, `channels_demo`,
  `goroutines_demo`, `mutex_counter`, `worker` and `worker_pool`, built on
  `threading` and `queue`. `worker_pool` returns the doubled job numbers in
  the order they finished.
- `algodemos.webdev`: `greeting`, the request handler `HelloHandler`,
  `make_server` (a `ThreadingHTTPServer`) and `serve`, which runs it until
  interrupted.
- `algodemos.cli`: `main`, the entry point of the `algodemos` command.

## What it does not do

The HTTP server is a demonstration only: it has no routing, no static
files, no TLS and no configuration beyond host and port. None of the data
structures are persisted.