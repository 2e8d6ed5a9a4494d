"""Output layer: renders ServiceResult for humans (Rich) or machines (JSON)."""
