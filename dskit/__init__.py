"""Classic data structures and algorithms: lists, queues, stacks, strings,
sparse matrices, hashing, trees, graphs, sorting and searching."""

__version__ = "0.1.0"