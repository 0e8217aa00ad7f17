"""Domain layer: entities, aggregates and repository interfaces."""
