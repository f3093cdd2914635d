"""Infrastructure layer: logging setup and development adapters."""
