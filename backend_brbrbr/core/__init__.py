"""
Core utilities: shared exceptions and cross-cutting concerns.

Provides the error taxonomy used by the analysis engine, API server, and CLI.
"""
