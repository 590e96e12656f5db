"""Infrastructure layer: Python source host."""
