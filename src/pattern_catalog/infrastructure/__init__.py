"""Infrastructure shared by the pattern examples: logging, registries, error handling."""
