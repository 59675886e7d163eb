"""Two-stack integer sorting with a restricted instruction set, and a checker."""

__version__ = "0.1.0"
__all__ = ["algorithms", "checker", "cli", "parsing", "stacks"]