"""
ingress.logger
~~~~~~~~~~~~~~
JSON-lines annotation events with daily rotation.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import List

_ISO = "%Y-%m-%dT%H:%M:%SZ"


def _now() -> str:  # RFC-3339 without microseconds
    return datetime.now(tz=timezone.utc).strftime(_ISO)


class _JSONFormatter(logging.Formatter):
    def format(self, record):  # type: ignore[override]
        if not isinstance(record.msg, dict):
            return json.dumps({"event": "message", "msg": record.getMessage()})
        return json.dumps(record.msg, separators=(",", ":"))


class AnnotationLogger:
    def __init__(self, basename: str | Path, level: int | str = logging.INFO):
        root = logging.getLogger("ingress")
        root.setLevel(level)
        root.propagate = False

        basename = Path(basename).with_suffix("")
        jsonl_file = basename.with_suffix(".jsonl")

        h = logging.handlers.TimedRotatingFileHandler(
            jsonl_file, when="midnight", backupCount=7, encoding="utf-8"
        )
        h.setFormatter(_JSONFormatter())
        root.addHandler(h)

        self.log = root
        self.path = jsonl_file
        self._handler = h

    def close(self) -> None:
        self.log.removeHandler(self._handler)
        self._handler.close()

    def parsed(self, ingress: str, annotation: str, cidr: List[str]):
        self.log.info(
            {
                "event": "parsed",
                "ts": _now(),
                "ingress": ingress,
                "annotation": annotation,
                "cidr": cidr,
            }
        )

    def missing(self, ingress: str, annotation: str):
        self.log.debug(
            {
                "event": "missing",
                "ts": _now(),
                "ingress": ingress,
                "annotation": annotation,
            }
        )

    def invalid(self, ingress: str, annotation: str, reason: str):
        self.log.warning(
            {
                "event": "invalid",
                "ts": _now(),
                "ingress": ingress,
                "annotation": annotation,
                "reason": reason,
            }
        )
