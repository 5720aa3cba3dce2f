"""Configuration, paths and logging."""
