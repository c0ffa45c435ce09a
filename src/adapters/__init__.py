"""Adapters: concrete implementations of the core interfaces (AI provider, HTTP, files)."""
