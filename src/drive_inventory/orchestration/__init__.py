"""Traversal and end-to-end scan orchestration."""
