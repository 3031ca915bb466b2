"""Configuration, shared types and errors."""
