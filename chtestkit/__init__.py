"""Error types, protocol codes, comparison, formatting, timing and test-value helpers."""

__version__ = "0.1.0"

__all__ = [
    "compare",
    "errors",
    "formatting",
    "generators",
    "protocol",
    "sequences",
    "tcp_server",
    "timing",
]