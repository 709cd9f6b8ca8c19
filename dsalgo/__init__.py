"""Classic data structures and algorithms: stacks, queues, trees, graphs, expressions, searching and sorting."""

__version__ = "0.1.0"