"""Domain layer: records and pure grid functions."""
