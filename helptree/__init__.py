"""Helptree - permission-aware help for hierarchical command trees.

Locates commands by a path of tokens, groups and paginates sibling commands
for browsing, and renders listings or single-command usage text.
Command trees are described in TOML files or registered from handler objects.
"""
