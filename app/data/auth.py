"""
Auth + profile operations.

Unlike the dataset fetchers, write and auth paths propagate the store's
exception unchanged so the page can show its message. Read paths
(`get_current_user`, `get_user_profile`) degrade to None.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from supabase import Client

from data import queries
from data.connection import StoreNotConfiguredError
from data.models import AuthUser, ProfileRow, UserProfile
from data.transforms import transform_profile

logger = logging.getLogger(__name__)

# Profile columns a caller may write; anything else in `updates` is dropped.
PROFILE_FIELDS = ("email", "full_name", "username", "avatar_url", "website", "role")


def _require(client: Optional[Client]) -> Client:
    if client is None:
        raise StoreNotConfiguredError("Supabase not configured")
    return client


def _to_auth_user(user: Any) -> Optional[AuthUser]:
    if user is None:
        return None
    return AuthUser(
        id=str(user.id),
        email=getattr(user, "email", None) or "",
        user_metadata=dict(getattr(user, "user_metadata", None) or {}),
    )


def sign_up(client: Optional[Client], email: str, password: str, full_name: Optional[str] = None):
    return _require(client).auth.sign_up(
        {
            "email": email,
            "password": password,
            "options": {"data": {"full_name": full_name or ""}},
        }
    )


def sign_in(client: Optional[Client], email: str, password: str):
    return _require(client).auth.sign_in_with_password({"email": email, "password": password})


def sign_out(client: Optional[Client]) -> None:
    _require(client).auth.sign_out()


def get_current_user(client: Optional[Client]) -> Optional[AuthUser]:
    if client is None:
        return None
    try:
        resp = client.auth.get_user()
    except Exception as e:
        logger.warning("Could not read current user: %s", e)
        return None
    return _to_auth_user(getattr(resp, "user", None))


def get_user_profile(client: Optional[Client], user_id: str) -> Optional[UserProfile]:
    if client is None:
        return None
    try:
        resp = queries.q_profile(client, user_id).execute()
        data = getattr(resp, "data", None) if resp is not None else None
        if not data:
            return None
        return transform_profile(ProfileRow.model_validate(data))
    except Exception as e:
        logger.warning("Could not read profile %s: %s", user_id, e)
        return None


def update_user_profile(client: Optional[Client], user_id: str, updates: dict[str, Any]) -> UserProfile:
    """Upsert keyed by id; returns the stored profile."""
    client = _require(client)
    payload = {k: v for k, v in updates.items() if k in PROFILE_FIELDS}
    payload["id"] = user_id
    payload["updated_at"] = datetime.now(timezone.utc).isoformat()

    resp = client.table(queries.T_PROFILES).upsert(payload).execute()
    rows = getattr(resp, "data", None) or []
    stored = rows[0] if rows else payload
    return transform_profile(ProfileRow.model_validate(stored))


def avatar_path(user_id: str, filename: str, now_ms: Optional[int] = None) -> str:
    """'{user_id}/{user_id}-{epoch_ms}.{ext}'"""
    ext = filename.rsplit(".", 1)[-1] if "." in filename else "bin"
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{user_id}/{user_id}-{stamp}.{ext}"


def upload_avatar(
    client: Optional[Client],
    user_id: str,
    content: bytes,
    filename: str,
    bucket: str = "avatars",
    content_type: Optional[str] = None,
) -> str:
    """Upload bytes, then resolve the object's public URL."""
    client = _require(client)
    path = avatar_path(user_id, filename)
    options = {"upsert": "true"}
    if content_type:
        options["content-type"] = content_type

    store = client.storage.from_(bucket)
    store.upload(path, content, options)
    url = store.get_public_url(path)
    logger.info("Uploaded avatar for %s to %s/%s", user_id, bucket, path)
    return url


def reset_password(client: Optional[Client], email: str, redirect_to: Optional[str] = None) -> None:
    options = {"redirect_to": redirect_to} if redirect_to else {}
    _require(client).auth.reset_password_for_email(email, options)


def update_password(client: Optional[Client], new_password: str) -> None:
    _require(client).auth.update_user({"password": new_password})


class _NoopSubscription:
    def unsubscribe(self) -> None:
        return None


def on_auth_state_change(client: Optional[Client], callback: Callable[[Optional[AuthUser]], None]):
    """
    Register for session transitions. The callback gets an AuthUser, or None
    when the session ends. Without a client, returns a subscription whose
    unsubscribe() does nothing.
    """
    if client is None:
        return _NoopSubscription()

    def _listener(event: Any, session: Any) -> None:
        user = getattr(session, "user", None) if session is not None else None
        callback(_to_auth_user(user))

    return client.auth.on_auth_state_change(_listener)
