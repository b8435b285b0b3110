# core/logging_config.py
from __future__ import annotations
import logging

from core.settings import LoggingConfig

_configured = False

def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the configured level/format once per process (Streamlit reruns the script often)."""
    global _configured
    if _configured:
        return
    logging.basicConfig(level=getattr(logging, cfg.level.upper(), logging.INFO), format=cfg.format)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _configured = True
