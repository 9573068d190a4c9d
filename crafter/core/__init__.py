"""Core configuration, schemas, and pure wizard logic."""
