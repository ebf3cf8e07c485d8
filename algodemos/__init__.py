"""Runnable demonstrations of language basics, data structures, algorithms, threads and a tiny HTTP server."""

__version__ = "0.1.0"