"""Internal helpers for recursive_category."""
