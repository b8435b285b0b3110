# core/media.py
from __future__ import annotations
import base64
from typing import Optional


def normalize_media_path(path: Optional[str]) -> Optional[str]:
    """Server paths may come back Windows-style (``uploads\\a.png``); always store forward slashes."""
    if not path:
        return None
    p = str(path).strip().replace("\\", "/")
    return p or None


def media_url(media_root: str, path: Optional[str]) -> Optional[str]:
    """
    Returns the displayable URL for a stored file path, or None.
    URLs are passed through; relative paths are joined onto the media root.
    """
    p = normalize_media_path(path)
    if not p:
        return None
    if p.startswith(("http://", "https://", "data:")):
        return p
    return f"{media_root.rstrip('/')}/{p.lstrip('/')}"


def data_url(content: bytes, content_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type or 'application/octet-stream'};base64,{encoded}"
