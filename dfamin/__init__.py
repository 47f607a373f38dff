"""Minimization of deterministic finite automata, with an interactive command."""

__version__ = "0.1.0"
__all__ = ["__version__"]