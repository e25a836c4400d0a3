"""isograph - consistency model reasoning for transaction history checkers."""

__version__ = "0.1.0"
