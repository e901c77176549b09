from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool


NAV_ITEMS = [
    ("🏠 Overview", "landing"),
    ("🧰 Assets", "assets"),
    ("📑 Contractors / AMC", "contractors"),
    ("⚡ Electricity", "electricity"),
    ("💧 Water", "water"),
    ("♻️ STP", "stp"),
    ("⚙️ Settings", "settings"),
]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🏢 Facilities Operations")
        st.caption("Assets, contracts and utilities")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        with st.expander("Data source", expanded=False):
            use_mock = st.toggle(
                "Use demo data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, pages read from Supabase. Missing config, errors or empty tables fall back to demo data.",
            )
            st.session_state["use_mock"] = use_mock
            st.caption("Supabase: " + ("configured" if cfg.store_configured else "not configured"))
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(view=view, use_mock=use_mock)
