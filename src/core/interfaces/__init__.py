"""Core interfaces.

- Contracts (Protocol) implemented by concrete adapters.
- The core depends on these abstractions, never on an SDK.
"""

from core.interfaces.text_generator import TextGenerator, UpstreamError

__all__ = ["TextGenerator", "UpstreamError"]
