# dsakit

A library of classic data structures and algorithms in plain Python, with
no third-party dependencies.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.recursion`

- `power(x, n)` – `x ** n` by repeated squaring; `n` must be non-negative.
- `tiling_ways(n)` – ways to tile a 2 × n floor with 2 × 1 tiles.
- `binary_search(items, key)` – index of `key` in a sorted sequence, or `-1`.
- `binary_strings(n)` – all binary strings of length `n` with no two adjacent 1s.
- `count_same_end_substrings(text)` – substrings that start and end with the same character.
- `find_all_occurrences(items, key)` – every index where `key` occurs.
- `friends_pairing(n)` – ways `n` friends can stay single or pair up.
- `remove_duplicates(text)` – keeps only the first occurrence of each character.
- `tower_of_hanoi(n, source, helper, destination)` – list of `Move(disk, source, destination)` tuples; `str(move)` reads "transfer disk 1 from A to C".

### `dsakit.dp`

- `fibonacci(n)`, `fibonacci_sequence(n)` – the `n`-th Fibonacci number and the list F(0)…F(n).
- `rob_memoized(nums)`, `rob_tabulated(nums)`, `rob_constant_space(nums)` – the maximum sum of non-adjacent elements (the house-robber problem), top-down, bottom-up and in constant space.

### `dsakit.backtracking`

- `grid_ways(rows, cols)` – right/down paths across a grid.
- `keypad_combinations(number)` – letter strings a phone keypad spells for the digits of `number`.
- `n_queens(n)` – a generator of boards, each a list of row strings such as `".Q.."`; `count_n_queens(n)` counts them; `format_board(board)` renders one with spaces between cells.
- `rat_maze_paths(maze)` – every path of `D`/`R`/`U`/`L` steps through the open (1) cells of a square maze.
- `solve_sudoku(grid)` – a solved copy of a 9 × 9 grid (0 marks an empty cell); raises `ValueError` for a malformed or unsolvable grid. `format_sudoku(grid)` renders a grid.

### `dsakit.bst`

`Node` (a dataclass with `value`, `left`, `right`) and functions on trees:
`insert`, `build_bst`, `inorder`, `preorder`, `search`, `delete`,
`values_in_range`, `root_to_leaf_paths`, `is_valid_bst`, `bst_from_sorted`,
`balance`, `largest_bst_size` and `merge_bsts`. Duplicate values are ignored
on insertion.

### `dsakit.heaps`

- `MaxHeap` – `push`, `pop` (raises `IndexError` when empty), `len()`, and iteration over the heap array.
- `max_heapify(items, size, index)`, `min_heapify(items, size, index)` – sift an item down in place.
- `heap_sort(items)` – a new ascending list.

### `dsakit.stacks`

- `LinkedStack` – `push`, `pop`, `peek` (both raise `IndexError` when empty) and `len()`.
- `push_at_bottom(stack, value)`, `reverse_stack(stack)` – work on a list whose end is the top.
- `reverse_string(text)`, `stock_span(prices)`, `max_histogram_area(heights)`, `next_greater(values)`.
- `is_valid_parentheses(text)`, `has_duplicate_parentheses(text)` – the latter raises `ValueError` for unbalanced input.

### `dsakit.graphs`

`Graph(vertices, undirected=True)` on vertices `0 … vertices-1`, with
`add_edge`, `neighbours`, `str()` (one "u : neighbours" line per vertex),
`bfs`, `dfs`, `has_path`, `is_bipartite`, `has_cycle_undirected`,
`has_cycle_directed`, `bfs_components`, `dfs_components`,
`topological_sort` (depth-first) and `topological_sort_kahn`. Neighbours are
visited in the order their edges were added. Out-of-range vertices raise
`IndexError`.

### `dsakit.grid_search`

- `count_islands(grid)` – groups of `"1"` cells joined in any of eight directions.
- `oranges_rotting(grid)` – minutes until every fresh orange (1) is rotten, or `-1`.
- `ladder_length(begin_word, end_word, word_list)` – words in the shortest one-letter-change chain, or 0.

### `dsakit.linked_list`

`ListNode` and `LinkedList` (`push_front`, `push_back`, `pop_front`,
`pop_back`, `insert`, `index`, `reverse`, `remove_nth_from_end`, `len()`,
iteration, `in`, and `str()` such as `"1 -> 2 -> NULL"`), plus helpers on
chains of nodes: `from_values`, `to_values`, `has_cycle`, `remove_cycle`,
`split_at_middle`, `merge_sorted`, `merge_sort`, `reverse_list` and `zigzag`.

### `dsakit.doubly_linked_list`

`DoublyLinkedList` with `push_front`, `pop_front`, forward and `reversed()`
iteration, `len()`, and `str()` such as `"1 <=> 2 <=> NULL"`.

### `dsakit.queues`

- `LinkedQueue` and `TwoStackQueue` – `push`, `pop`, `front`, `len()`.
- `TwoQueueStack` – `push`, `pop`, `top`, `len()`.
- `first_non_repeating(text)` – for each prefix, its first character seen once so far, or `None`.
- `reverse_queue(queue)`, `interleave(queue)`, `reverse_first_k(queue, k)` – change a `collections.deque` in place.

## Example

```python
from dsakit.recursion import power
from dsakit.backtracking import count_n_queens
from dsakit.bst import build_bst, inorder
from dsakit.graphs import Graph
from dsakit.stacks import is_valid_parentheses

power(2, 10)                     # 1024
count_n_queens(4)                # 2
is_valid_parentheses("{[()]}")   # True

root = build_bst([8, 5, 3, 1, 4, 6, 10, 11, 14])
inorder(root)                    # [1, 3, 4, 5, 6, 8, 10, 11, 14]

graph = Graph(6, undirected=False)
for u, v in [(2, 3), (3, 1), (4, 0), (4, 1), (5, 0), (5, 2)]:
    graph.add_edge(u, v)
graph.topological_sort_kahn()    # [4, 5, 0, 2, 3, 1]
```

Functions return their results rather than printing them, and raise an
exception where they cannot proceed, such as popping from an empty
container.

## What it does not do

dsakit is a library only: it has no command-line program, and it does not
read or write files.