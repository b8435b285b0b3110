# core/async_utils.py
from __future__ import annotations
import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")

def run_sync(awaitable: Awaitable[T]) -> T:
    """Drive a store/controller coroutine to completion from Streamlit's script thread."""
    async def _wrap() -> T:
        return await awaitable
    return asyncio.run(_wrap())
