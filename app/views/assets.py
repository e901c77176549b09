from __future__ import annotations

import math

import pandas as pd
import streamlit as st

from components.header import render_source_badge
from config import AppConfig
from data.service import get_assets


PAGE_SIZE = 50


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Assets")

    c1, c2 = st.columns([3, 1])
    search = c1.text_input("Search", placeholder="Name, location, tag or category", key="asset_search")
    page = int(c2.number_input("Page", min_value=1, value=int(st.session_state.get("asset_page", 1)), step=1))
    st.session_state["asset_page"] = page

    if st.button("Refresh", key="assets_refresh"):
        st.rerun()

    with st.spinner("Loading assets..."):
        result = get_assets(cfg, use_mock, page=page, page_size=PAGE_SIZE, search=search)
    render_source_badge(result)

    total = result.data.count
    pages = max(1, math.ceil(total / PAGE_SIZE))
    if page > pages:
        # Search narrowed the result set below the current page.
        st.session_state["asset_page"] = pages
        st.rerun()
    st.caption(f"{total:,} assets · page {page} of {pages}")

    if not result.data.data:
        st.info("No assets match this search.")
        return

    df = pd.DataFrame([a.as_dict() for a in result.data.data])
    st.dataframe(df, use_container_width=True, hide_index=True)

    by_status = df.groupby("status", as_index=False).size().rename(columns={"size": "count"})
    st.caption("Status on this page")
    st.dataframe(by_status, hide_index=True)
