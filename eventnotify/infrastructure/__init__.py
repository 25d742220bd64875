"""Infrastructure adapters: logging, metrics and the system clock."""
