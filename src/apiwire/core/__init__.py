"""Core cross-cutting services: configuration and security."""
