"""Infrastructure layer for fskit."""
