"""AgendaPro - scheduling and cash-flow backend for small businesses."""

__version__ = "0.1.0"
