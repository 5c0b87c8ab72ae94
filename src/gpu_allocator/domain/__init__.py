"""Domain layer: entities, value objects, services and errors."""
