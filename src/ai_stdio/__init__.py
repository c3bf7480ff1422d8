"""ai-stdio -- append-only markdown chat documents for LLM backends."""

__version__ = '0.3.0'
