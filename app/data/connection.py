from __future__ import annotations

import logging
import threading
from typing import Optional

from supabase import Client, create_client

from config import AppConfig

logger = logging.getLogger(__name__)

# Legacy anon keys are JWTs ("eyJ..."); newer projects hand out publishable keys.
_KEY_PREFIXES = ("eyJ", "sb_publishable_")

_client: Optional[Client] = None
# (url, key) pair the client library rejected; not retried for the same pair.
_rejected: Optional[tuple[str, str]] = None
_client_lock = threading.Lock()


class StoreNotConfiguredError(RuntimeError):
    pass


def _valid_url(url: Optional[str]) -> bool:
    return bool(url) and url.startswith("https://")


def _valid_key(key: Optional[str]) -> bool:
    return bool(key) and key.startswith(_KEY_PREFIXES)


def is_store_configured(cfg: AppConfig) -> bool:
    """True when a usable endpoint + key pair is present."""
    return _valid_url(cfg.supabase_url) and _valid_key(cfg.supabase_anon_key)


def get_store_client(cfg: AppConfig) -> Optional[Client]:
    """
    Returns the process-wide Supabase client used by the dataset reads, or None
    when configuration is absent, malformed or rejected by the client library.
    Built at most once; never invalidated. A rejected URL/key pair is
    remembered and not retried.

    Never sign in on this client: it is shared by every Streamlit session.
    Auth calls go through `create_session_client`.
    """
    global _client, _rejected

    if not is_store_configured(cfg):
        return None
    if _client is not None:
        return _client

    pair = (cfg.supabase_url, cfg.supabase_anon_key)
    with _client_lock:
        if _client is None:
            if _rejected == pair:
                return None
            try:
                _client = create_client(cfg.supabase_url, cfg.supabase_anon_key)
            except Exception as e:
                _rejected = pair
                logger.warning("Supabase client construction failed: %s", e)
                return None
            logger.info("Supabase client created for %s", cfg.supabase_url)
    return _client


def create_session_client(cfg: AppConfig) -> Optional[Client]:
    """
    A fresh client for one user session. It holds that user's auth session in
    memory, so callers keep it per session (st.session_state) and never share it.
    """
    if not is_store_configured(cfg):
        return None
    try:
        return create_client(cfg.supabase_url, cfg.supabase_anon_key)
    except Exception as e:
        logger.warning("Supabase session client construction failed: %s", e)
        return None


def require_store_client(cfg: AppConfig) -> Client:
    client = get_store_client(cfg)
    if client is None:
        raise StoreNotConfiguredError(
            "Supabase not configured. Set SUPABASE_URL (https://...) and SUPABASE_ANON_KEY."
        )
    return client


def reset_store_client() -> None:
    """Drop the cached client and any remembered rejection. Tests only."""
    global _client, _rejected
    with _client_lock:
        _client = None
        _rejected = None
