"""Domain models, cost/price model, validation and analysis windows."""
