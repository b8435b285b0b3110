# core/db.py
from __future__ import annotations
from pathlib import Path
from sqlalchemy import create_engine, text as sa_text

def get_engine(db_url: str):
    if db_url.startswith("sqlite:///") and db_url != "sqlite:///:memory:":
        db_file = db_url.replace("sqlite:///", "")
        Path(db_file).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(db_url, future=True)
    return engine

def init_db(engine):
    # durable client-side key/value slots (auth token, user profile, ...)
    with engine.begin() as conn:
        conn.execute(sa_text("""
        CREATE TABLE IF NOT EXISTS client_storage (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            scope TEXT NOT NULL DEFAULT 'default',
            item_key TEXT NOT NULL,
            item_value TEXT NOT NULL,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(scope, item_key)
        )"""))
