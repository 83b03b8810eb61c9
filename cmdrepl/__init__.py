"""Interactive terminal command processor with line editing, history and argument rules."""

__version__ = "0.1.0"