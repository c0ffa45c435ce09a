"""JSON export of the daily payload.

- Same shape as the HTTP response, so a saved file can be served statically.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import DailyPayload


def export_payload_json(*, payload: DailyPayload, output_path: Path) -> Path:
    """Write `DailyPayload` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = payload.model_dump(mode="json")
    output_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
