"""
ingress.defaults
~~~~~~~~~~~~~~~~
Default backend configuration handed to every annotation parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class Backend:
    whitelist_source_range: List[str] = field(default_factory=list)
    proxy_connect_timeout: int = 5
    proxy_read_timeout: int = 60
    proxy_send_timeout: int = 60
    ssl_redirect: bool = True
