"""Command tree handling for helptree.

This package provides:
- models: Data structures (CommandArg, CommandNode, Dispatcher)
- parsing: Docstring and usage parsing
- discovery: Command registration from handler objects
- tree: Command tree building from configuration
"""
