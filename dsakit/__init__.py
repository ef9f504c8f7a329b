"""Classic data structures and algorithms: recursion, dynamic programming, backtracking, trees, heaps, stacks, queues, linked lists and graphs."""

__version__ = "0.1.0"