"""Classic algorithms: recursion, dynamic programming, trees, graphs and small puzzles."""

__version__ = "0.1.0"