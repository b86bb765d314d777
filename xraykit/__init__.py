"""Trace headers, wildcard matching, daemon endpoints, host metadata and logging for tracing."""

__version__ = "0.1.0"