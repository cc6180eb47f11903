"""contributor-resolver command-line package."""
