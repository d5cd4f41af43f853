from dataclasses import dataclass, field
import os
from typing import List
from dotenv import load_dotenv

@dataclass
class Config:
    log_path: str
    log_level: str
    strict: bool
    default_whitelist: List[str] = field(default_factory=list)

def _csv(raw: str) -> List[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]

def load_config():
    load_dotenv(override=True)
    return Config(
        log_path=os.getenv("INGRESS_LOG_PATH", "ingress.log"),
        log_level=os.getenv("INGRESS_LOG_LEVEL", "INFO").upper(),
        strict=os.getenv("INGRESS_STRICT", "false").lower() == "true",
        default_whitelist=_csv(os.getenv("INGRESS_DEFAULT_WHITELIST", "")),
    )
