"""Integer matrix operations and a command that applies them to matrices read from stdin."""

__version__ = "0.1.0"
__all__ = ["__version__"]