"""Cursors with traversal categories, a facade for defining them, adaptors and function-backed input cursors."""

__version__ = "0.1.0"

__all__ = [
    "traversal",
    "proxies",
    "traits",
    "facade",
    "distance",
    "adaptor",
    "generator",
    "function_input",
]