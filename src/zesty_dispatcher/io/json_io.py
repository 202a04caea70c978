"""JSON read/write helpers for events and dispatch reports."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from zesty_dispatcher.constants.reporting import JSON_INDENT, REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def dump_json(payload: object) -> str:
    """Serialize *payload* the way reports are printed and written."""
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


def write_json_atomic(path: Path, payload: object) -> None:
    """Write *payload* to a temp file beside *path*, then rename it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=REPORT_TEMP_PREFIX,
            suffix=REPORT_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(dump_json(payload))
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    os.replace(temp_name, path)
