"""Domain layer: shared exceptions and value-object base classes."""
