"""Point-of-sale checkout with pluggable promotion rules."""
