"""Core infrastructure: configuration, structured logging and metrics."""
