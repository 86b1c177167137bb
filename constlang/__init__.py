"""A tiny integer expression language with bindings, blocks, functions and an interactive prompt."""

__version__ = "0.2.7"