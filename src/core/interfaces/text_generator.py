"""Text generator contract.

- Structural contract (Protocol): the OpenAI adapter and the test fakes both satisfy it.
- `UpstreamError` is the only failure adapters raise.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import SamplingConfig


class UpstreamError(Exception):
    """The upstream generator could not produce content (network, auth, quota, empty reply)."""


@runtime_checkable
class TextGenerator(Protocol):
    """Minimal contract for a text-completion provider.

    Rules:
    - `complete` is async because it performs network I/O.
    - Provider failures are raised as `UpstreamError`.
    """

    async def complete(self, instructions: str, config: SamplingConfig) -> str:
        """Send `instructions` with `config` and return the raw text content."""

        ...
