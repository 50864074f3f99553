"""JSON input adapters."""
