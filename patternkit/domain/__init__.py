"""Domain layer - exceptions, events and the table-driven state machine."""
