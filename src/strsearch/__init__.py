"""strsearch -- exact string matching with instrumented algorithms."""

__version__ = "0.1.0"
