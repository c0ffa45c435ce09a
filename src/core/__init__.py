"""Core: domain models, interfaces and the daily generation services."""
