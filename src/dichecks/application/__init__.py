"""Application layer: checks, processing and reporting."""
