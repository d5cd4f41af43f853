"""
ingress.parser
~~~~~~~~~~~~~~
Typed getters over a resource's annotations, shared by annotation parsers.
"""

from __future__ import annotations

from typing import Optional

from .errors import InvalidContent, MissingAnnotation
from .resource import ConfigSource

_TRUE = {"true", "1"}
_FALSE = {"false", "0"}


def get_string_annotation(name: str, ing: Optional[ConfigSource]) -> str:
    """Return the raw value of annotation *name*.

    Raises MissingAnnotation when the resource is None or the key is absent.
    """
    if ing is None:
        raise MissingAnnotation(annotation=name)
    val = ing.get_string(name)
    if val is None:
        raise MissingAnnotation(annotation=name)
    return val


def get_bool_annotation(name: str, ing: Optional[ConfigSource]) -> bool:
    val = get_string_annotation(name, ing).lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise InvalidContent(f"{name}: expected a boolean, got {val!r}", annotation=name)


def get_int_annotation(name: str, ing: Optional[ConfigSource]) -> int:
    val = get_string_annotation(name, ing)
    try:
        return int(val, 10)
    except ValueError as e:
        raise InvalidContent(
            f"{name}: expected an integer, got {val!r}", annotation=name
        ) from e
