"""Configuration, security helpers and domain errors."""
