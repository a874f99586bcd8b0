"""A small shell, a two-command pipeline runner and the string, memory, line and list helpers behind them."""

__version__ = "0.1.0"