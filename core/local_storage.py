# core/local_storage.py
"""
Durable key/value storage for the client: the auth token and the signed-in
user's profile survive browser reloads and app restarts.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Optional
from sqlalchemy import text as sql_text

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "default"

def get_item(engine, key: str, scope: str = DEFAULT_SCOPE) -> Optional[str]:
    with engine.begin() as conn:
        row = conn.execute(sql_text(
            "SELECT item_value FROM client_storage WHERE scope=:s AND item_key=:k"
        ), dict(s=scope, k=key)).fetchone()
    return row[0] if row else None

def set_item(engine, key: str, value: str, scope: str = DEFAULT_SCOPE) -> None:
    with engine.begin() as conn:
        conn.execute(sql_text("""
            INSERT INTO client_storage (scope, item_key, item_value)
            VALUES (:s, :k, :v)
            ON CONFLICT(scope, item_key) DO UPDATE
            SET item_value=excluded.item_value, updated_at=CURRENT_TIMESTAMP
        """), dict(s=scope, k=key, v=value))

def remove_item(engine, key: str, scope: str = DEFAULT_SCOPE) -> None:
    with engine.begin() as conn:
        conn.execute(sql_text(
            "DELETE FROM client_storage WHERE scope=:s AND item_key=:k"
        ), dict(s=scope, k=key))

def get_json(engine, key: str, scope: str = DEFAULT_SCOPE) -> Any:
    raw = get_item(engine, key, scope)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Corrupt JSON stored under %r: %s", key, e)
        return None

def set_json(engine, key: str, value: Any, scope: str = DEFAULT_SCOPE) -> None:
    set_item(engine, key, json.dumps(value, ensure_ascii=False), scope)
