"""Classic data structures and algorithms: sorting, searching, lists, queues,
stacks, hashing, heaps, trees, tries, graphs, backtracking and dynamic
programming, in plain Python."""

__version__ = "0.1.0"