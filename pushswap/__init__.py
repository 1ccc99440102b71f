"""Two-stack integer sorting with a restricted set of operations: input parsing, stacks, sorting strategies and a command-line entry point."""

__version__ = "0.1.0"