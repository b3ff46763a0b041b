"""Domain ports (interfaces)."""
