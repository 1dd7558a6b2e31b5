"""Classic data structures and algorithms: linked lists, stacks, queues, trees,
graphs, sorting, set intersection, a title search engine and a terminal animation."""

__version__ = "1.0.0"