"""Infrastructure layer - registries, logging, events and singleton access."""
