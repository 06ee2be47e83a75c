"""Infrastructure adapters for storage, time, settings and logging."""
