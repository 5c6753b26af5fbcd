# src/cli/__init__.py
"""Command-line entry points: build-catalog and pack-catalog."""
