from __future__ import annotations

import streamlit as st

from data.service import DataResult


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="fo-header">
  <div>
    <div class="fo-title">{app_name}</div>
    <div class="fo-subtitle">{subtitle}</div>
  </div>
  <div class="pill"><span class="dot"></span>{right_pill}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_source_badge(result: DataResult) -> None:
    """Live/Demo pill for one dataset, plus the reason when demo data was used."""
    label = "Live data" if result.is_live else "Demo data"
    st.markdown(
        f'<div class="pill {result.source}"><span class="dot"></span>{label}</div>',
        unsafe_allow_html=True,
    )
    if result.warning:
        st.caption(result.warning)
