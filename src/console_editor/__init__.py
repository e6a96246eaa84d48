"""In-memory, menu-driven text buffer editor."""

__all__ = [
    "adapters",
    "buffer",
    "runtime",
    "shell",
]

__version__ = "0.1.0"
