"""snapdiff - differences between distinct snapshot versions of a file."""
