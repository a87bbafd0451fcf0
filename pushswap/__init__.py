"""Two-stack integer sorting with a restricted instruction set, plus a checker."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "cost", "sorting", "checker"]