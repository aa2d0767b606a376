"""snapdiff API layer."""
