"""
ingress.ipwhitelist
~~~~~~~~~~~~~~~~~~~
Source-range allow-list read from the resource annotation::

    ingress.kubernetes.io/whitelist-source-range: "10.0.0.0/24,192.168.1.0/24"

The value is split on commas, every token must be an exact CIDR (IPv4 or
IPv6, address/prefix) and the result is deduplicated and sorted.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .defaults import Backend
from .errors import InvalidCIDR, MissingAnnotation
from .parser import get_string_annotation
from .resource import ConfigSource

WHITELIST = "ingress.kubernetes.io/whitelist-source-range"


@dataclass(frozen=True, slots=True)
class SourceRange:
    cidr: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"cidr": list(self.cidr)}


def parse_annotations(
    default_backend: Backend | None, ing: Optional[ConfigSource]
) -> SourceRange:
    """Return the whitelist configured on *ing*.

    *default_backend* is accepted like every other annotation parser but is
    not consulted.  Errors carry an empty SourceRange in ``source_range``.
    """
    try:
        val = get_string_annotation(WHITELIST, ing)
    except MissingAnnotation as e:
        e.source_range = SourceRange()
        raise

    networks = set()
    for token in val.split(","):
        net = _parse_cidr(token)
        if net is None:
            raise InvalidCIDR(token, annotation=WHITELIST, source_range=SourceRange())
        networks.add(str(net))

    return SourceRange(cidr=sorted(networks))


def _parse_cidr(token: str) -> ipaddress.IPv4Network | ipaddress.IPv6Network | None:
    addr, sep, prefix = token.partition("/")
    # ip_network() also accepts bare addresses, dotted netmasks and IPv6 zones
    if not sep or not addr or "%" in addr:
        return None
    if not (prefix.isascii() and prefix.isdigit()):
        return None
    try:
        return ipaddress.ip_network(token, strict=False)
    except ValueError:
        return None
