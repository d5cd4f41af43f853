"""
ingress.extractor
~~~~~~~~~~~~~~~~~
Runs every registered annotation parser over one resource.  All parsers
share the signature ``parser(default_backend, ing) -> policy`` and report
problems with :class:`~ingress.errors.AnnotationError`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from . import ipwhitelist
from .defaults import Backend
from .errors import AnnotationError, InvalidContent, MissingAnnotation
from .logger import AnnotationLogger
from .resource import Ingress

Parser = Callable[[Backend, Optional[Ingress]], Any]


class AnnotationExtractor:
    def __init__(
        self,
        backend: Backend | None = None,
        logger: AnnotationLogger | None = None,
    ) -> None:
        self.backend = backend or Backend()
        self.logger = logger
        self.errors: List[Tuple[str, AnnotationError]] = []
        self._parsers: Dict[str, Tuple[Parser, str]] = {}
        self.register("whitelist", ipwhitelist.parse_annotations, ipwhitelist.WHITELIST)

    def register(self, name: str, parser: Parser, annotation: str = "") -> None:
        self._parsers[name] = (parser, annotation or name)

    def extract(self, ing: Optional[Ingress]) -> Dict[str, Any]:
        """Return ``{parser name: policy}``; failed parsers yield their empty policy."""
        key = ing.key if ing is not None else "-"
        results: Dict[str, Any] = {}
        for name, (parser, annotation) in self._parsers.items():
            try:
                policy = parser(self.backend, ing)
            except MissingAnnotation as exc:
                results[name] = exc.source_range
                if self.logger:
                    self.logger.missing(key, annotation)
                continue
            except InvalidContent as exc:
                results[name] = exc.source_range
                self.errors.append((name, exc))
                if self.logger:
                    self.logger.invalid(key, annotation, str(exc))
                continue

            results[name] = policy
            if self.logger:
                self.logger.parsed(key, annotation, getattr(policy, "cidr", []))
        return results
