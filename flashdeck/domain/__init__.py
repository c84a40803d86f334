"""Domain layer: entities and value objects, free of HTTP and SQL concerns."""
