"""Printf formatting, line reading, push_swap sorting and checking, a height-map viewer and a pipeline runner."""

__version__ = "0.1.0"