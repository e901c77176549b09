from __future__ import annotations

import pandas as pd
import streamlit as st

from components.header import render_source_badge
from components.metrics import Kpi, render_kpi_row
from config import AppConfig
from data import aggregations as agg
from data.service import get_contractors


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Contractors / AMC")

    if st.button("Refresh", key="contractors_refresh"):
        st.rerun()

    with st.spinner("Loading contracts..."):
        result = get_contractors(cfg, use_mock)
    render_source_badge(result)

    contractors = result.data
    counts = agg.contractor_status_counts(contractors)
    expiring = agg.contractors_expiring(contractors, within_days=90)

    render_kpi_row(
        [
            Kpi("TOTAL CONTRACTS", str(len(contractors))),
            Kpi("ACTIVE", str(counts.get("Active", 0))),
            Kpi("EXPIRED", str(counts.get("Expired", 0))),
            Kpi("EXPIRING ≤ 90 DAYS", str(len(expiring))),
            Kpi("ACTIVE ANNUAL VALUE", f"{agg.contractor_annual_total(contractors):,.0f} OMR"),
        ]
    )

    if expiring:
        st.subheader("Renewals due")
        st.dataframe(pd.DataFrame([c.as_dict() for c in expiring]), use_container_width=True, hide_index=True)

    st.subheader("All contracts")
    status = st.selectbox("Status", ["All"] + sorted(counts))
    shown = contractors if status == "All" else [c for c in contractors if c.status == status]
    st.dataframe(pd.DataFrame([c.as_dict() for c in shown]), use_container_width=True, hide_index=True)
