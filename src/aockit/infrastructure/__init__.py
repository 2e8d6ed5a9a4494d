"""Infrastructure layer: file access for puzzle input."""
