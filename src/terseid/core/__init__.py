"""Core ID engine and configuration."""
