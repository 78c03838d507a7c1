"""
Backend brbrbr: AI vs human text detection service.

Scores a block of text with five heuristic signals, or with a hosted
text-classification model when one is configured, and returns a
human/AI percentage split plus a verdict. Modular architecture with clear
separation between the analysis engine, configuration, and API server.
"""

__version__ = "0.1.0"
