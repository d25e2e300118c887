"""Domain layer: entities, query objects and repository interfaces."""
