"""Infrastructure adapters, grouped by bounded context."""
