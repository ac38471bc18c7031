"""Chess board, pieces with their move rules, and a console launcher."""

__version__ = "0.1.0"