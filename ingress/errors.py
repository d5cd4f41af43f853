"""
ingress.errors
~~~~~~~~~~~~~~
Errors raised by annotation parsers.

Every error carries the (empty) policy the parser would have returned, so a
caller that catches it still holds a usable value::

    try:
        sr = parse_annotations(backend, ing)
    except AnnotationError as exc:
        sr = exc.source_range
"""

from __future__ import annotations

from typing import Any, Optional


class AnnotationError(Exception):
    code: str = "annotation_error"
    message: str = "Annotation error"

    def __init__(
        self,
        message: str | None = None,
        *,
        annotation: str | None = None,
        source_range: Any = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.annotation = annotation
        self.source_range = source_range
        super().__init__(self.message)


class MissingAnnotation(AnnotationError):
    code = "missing_annotation"
    message = "ingress rule without annotations"


class InvalidContent(AnnotationError):
    code = "invalid_content"
    message = "invalid annotation content"


class InvalidCIDR(InvalidContent):
    code = "invalid_cidr"
    message = "the annotation does not contain a valid IP address or network"

    def __init__(self, value: str, **kwargs: Any) -> None:
        self.value = value
        super().__init__(f"invalid CIDR {value!r}", **kwargs)


def is_missing_annotation(exc: Optional[BaseException]) -> bool:
    return isinstance(exc, MissingAnnotation)


def is_invalid_content(exc: Optional[BaseException]) -> bool:
    return isinstance(exc, InvalidContent)
