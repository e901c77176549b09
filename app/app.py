"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from config import configure_logging, get_config  # noqa: E402

from views import landing, assets, contractors, electricity, water, stp, settings  # noqa: E402


VIEWS = {
    "landing": landing,
    "assets": assets,
    "contractors": contractors,
    "electricity": electricity,
    "water": water,
    "stp": stp,
    "settings": settings,
}


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg.log_level)
    state = render_sidebar(cfg)

    if state.use_mock:
        pill = "Data: Demo"
    elif cfg.store_configured:
        pill = "Data: Supabase (demo fallback)"
    else:
        pill = "Data: Demo (Supabase not configured)"

    render_header(
        app_name="Facilities Operations",
        subtitle="Assets · AMC contracts · Electricity · Water · STP",
        right_pill=pill,
    )

    view = VIEWS.get(state.view)
    if view is None:
        st.error("Unknown view")
        return
    view.render(cfg, state.use_mock)


if __name__ == "__main__":
    main()
