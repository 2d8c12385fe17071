"""Infrastructure layer: persistence, security."""
