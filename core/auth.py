# core/auth.py
"""
Sign-in boundary. The API issues the token; this module only validates the
form, calls the login endpoint, and keeps ``token``/``user`` in durable
client storage. Token expiry is the server's business.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from core import local_storage
from core.api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"
LOGIN_PATH = "/api/users/login"
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

__all__ = [
    "SignInResult", "validate_credentials", "sign_in", "sign_out",
    "stored_token", "stored_user", "is_authenticated", "token_provider",
]


@dataclass
class SignInResult:
    ok: bool
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    user: Dict[str, Any] = field(default_factory=dict)


def validate_credentials(email: str, password: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    email = (email or "").strip()
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_RE.match(email):
        errors["email"] = "Email is invalid"
    if not password:
        errors["password"] = "Password is required"
    return errors


async def sign_in(api: ApiClient, engine, email: str, password: str) -> SignInResult:
    errors = validate_credentials(email, password)
    if errors:
        return SignInResult(ok=False, message="Please fix the highlighted fields", errors=errors)

    try:
        data = await api.post(LOGIN_PATH, json={"emailAddress": email.strip(), "password": password})
    except ApiError as e:
        logger.warning("Login failed for %s: %s", email, e)
        return SignInResult(ok=False, message=e.user_message("Login failed"))

    data = data or {}
    token = data.get("token")
    user = data.get("user") or {}
    if token:
        local_storage.set_item(engine, TOKEN_KEY, token)
        local_storage.set_json(engine, USER_KEY, user)
    else:
        logger.warning("Login response for %s carried no token", email)
    return SignInResult(ok=bool(token), message="Login successful!" if token else "Login failed", user=user)


def sign_out(engine) -> None:
    local_storage.remove_item(engine, TOKEN_KEY)
    local_storage.remove_item(engine, USER_KEY)


def stored_token(engine) -> Optional[str]:
    return local_storage.get_item(engine, TOKEN_KEY) or None


def stored_user(engine) -> Dict[str, Any]:
    user = local_storage.get_json(engine, USER_KEY)
    return user if isinstance(user, dict) else {}


def is_authenticated(engine) -> bool:
    return bool(stored_token(engine))


def token_provider(engine) -> Callable[[], Optional[str]]:
    return lambda: stored_token(engine)
