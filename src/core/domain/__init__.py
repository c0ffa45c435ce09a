"""Domain models and entities.

- Pure, strict data structures (Pydantic v2) and the fixed fallback content.
- The domain knows nothing about HTTP, the CLI or SDKs.
"""
