"""Lazily evaluated call chains, a tic-tac-toe model and a game flow."""

__version__ = "0.1.0"
__all__ = ["chain", "tic", "flow"]