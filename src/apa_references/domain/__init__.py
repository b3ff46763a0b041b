"""Domain layer: models, formatting services, rules and errors."""
