"""Domain layer: grid model and search services."""
