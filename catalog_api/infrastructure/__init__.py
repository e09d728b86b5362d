"""Infrastructure: configuration, database, logging."""
