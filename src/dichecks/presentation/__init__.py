"""Presentation layer: API helper, CLI and pytest plugin."""
