"""Infrastructure adapters: database, SQL repositories, settings, logging."""
