"""Infrastructure layer: adapters, logging, database wiring."""
