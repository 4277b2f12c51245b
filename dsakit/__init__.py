"""Classic data structures and algorithms: binary, search and AVL trees, linked lists, stacks, queues, heaps, graphs, tries, sorting, bit manipulation and dynamic programming."""

__version__ = "0.1.0"