"""Design pattern demonstrations grouped by category."""
