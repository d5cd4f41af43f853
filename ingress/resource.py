"""
ingress.resource
~~~~~~~~~~~~~~~~
Minimal routing resource model.  Parsers only need the annotation mapping,
read through the :class:`ConfigSource` capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from .errors import InvalidContent


@runtime_checkable
class ConfigSource(Protocol):
    def get_string(self, key: str) -> Optional[str]:
        """Return the value stored under *key*, or None when absent."""
        ...


@dataclass(slots=True)
class Ingress:
    name: str = ""
    namespace: str = "default"
    annotations: Optional[Dict[str, str]] = None

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> "Ingress":
        if not isinstance(manifest, Mapping):
            raise InvalidContent("manifest must be a mapping")
        meta = manifest.get("metadata") or {}
        if not isinstance(meta, Mapping):
            raise InvalidContent("manifest metadata must be a mapping")
        raw = meta.get("annotations")
        annotations: Optional[Dict[str, str]] = None
        if raw is not None:
            if not isinstance(raw, Mapping):
                raise InvalidContent("manifest annotations must be a mapping")
            annotations = {}
            for key, val in raw.items():
                if not isinstance(val, str):
                    raise InvalidContent(
                        f"annotation {key!r} must be a string, got {type(val).__name__}",
                        annotation=key,
                    )
                annotations[key] = val
        name = meta.get("name") or ""
        if not isinstance(name, str):
            raise InvalidContent("manifest name must be a string")
        namespace = meta.get("namespace") or "default"
        if not isinstance(namespace, str):
            raise InvalidContent("manifest namespace must be a string")
        return cls(
            name=name,
            namespace=namespace,
            annotations=annotations,
        )

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"

    def set_annotations(self, data: Optional[Dict[str, str]]) -> None:
        self.annotations = data

    def get_string(self, key: str) -> Optional[str]:
        if not self.annotations:
            return None
        return self.annotations.get(key)
