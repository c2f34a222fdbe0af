"""Domain layer: entities and view models."""
