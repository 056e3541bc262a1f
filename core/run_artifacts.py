"""Output artifact helpers for extracted documents."""

from __future__ import annotations

import json
import os
import re
from datetime import datetime, timezone
from typing import Any

_UNSAFE_NAME_RE = re.compile(r"[^A-Za-z0-9._-]+")


def write_document_json(
    payload: dict[str, Any],
    title: str,
    output_dir: str = "output/docs",
    indent: int = 2,
) -> str:
    """Write a JSON document dump named after ``title`` and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    data = dict(payload)
    data.setdefault("generated_utc", datetime.now(timezone.utc).isoformat())
    file_name = _UNSAFE_NAME_RE.sub("_", title).strip("_") or "document"
    path = os.path.join(output_dir, f"{file_name}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
        f.write("\n")
    return path
