from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here; components/styles.py turns them into CSS variables.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F3F6F8",
    "bg_secondary": "#FFFFFF",
    "bg_card": "#FFFFFF",
    # Accents (teal + slate)
    "accent_primary": "#0E7C86",
    "accent_secondary": "#14A3AE",
    "navy_900": "#0F1E2E",
    "navy_800": "#1C3045",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E2E8F0",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#B42318",
}


@dataclass(frozen=True)
class AppConfig:
    # Required for "live data" mode (Supabase). If either is unset or malformed,
    # every page falls back to demo data.
    supabase_url: Optional[str]
    supabase_anon_key: Optional[str]

    # Defaults
    default_use_mock: bool

    # Tariffs used by the derived economic fields (OMR)
    electricity_rate_per_kwh: float
    stp_tanker_fee: float
    stp_tse_saving_rate: float

    # Profile / auth
    avatar_bucket: str
    password_reset_redirect_url: Optional[str]

    log_level: str = "INFO"

    @property
    def store_configured(self) -> bool:
        # Local import: data.connection imports this module.
        from data.connection import is_store_configured

        return is_store_configured(self)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric %s=%r", name, raw)
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Accepts the NEXT_PUBLIC_* names used by the original web front end
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL") or _getenv("NEXT_PUBLIC_SUPABASE_URL"),
        supabase_anon_key=_getenv("SUPABASE_ANON_KEY") or _getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        default_use_mock=(_getenv("USE_MOCK_DATA", "false") or "false").lower() == "true",
        electricity_rate_per_kwh=_getfloat("ELECTRICITY_RATE_PER_KWH", 0.025),
        stp_tanker_fee=_getfloat("STP_TANKER_FEE", 4.5),
        stp_tse_saving_rate=_getfloat("STP_TSE_SAVING_RATE", 1.32),
        avatar_bucket=_getenv("AVATAR_BUCKET", "avatars") or "avatars",
        password_reset_redirect_url=_getenv("PASSWORD_RESET_REDIRECT_URL"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Basic root logging, set once per process (Streamlit reruns the script)."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
