"""Core models and payload validation."""
