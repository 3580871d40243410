"""Key/value lookup tool: load pairs from input, then answer searches."""

__version__ = "0.1.0"