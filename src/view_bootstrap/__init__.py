"""Bootstraps view hierarchy construction code around selected declarations."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "invocation",
    "runtime",
    "scaffold",
]

__version__ = "0.1.0"
