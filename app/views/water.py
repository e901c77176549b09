from __future__ import annotations

import pandas as pd
import streamlit as st

from components.header import render_source_badge
from components.metrics import Kpi, bar_chart, line_chart, render_kpi_row
from config import AppConfig
from data import aggregations as agg
from data.service import get_water_meters


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Water System")

    if st.button("Refresh", key="water_refresh"):
        st.rerun()

    with st.spinner("Loading water meters..."):
        result = get_water_meters(cfg, use_mock)
    render_source_badge(result)

    meters = result.data
    by_level = agg.water_by_month_and_level(meters)

    l1 = float(by_level["L1"].sum()) if "L1" in by_level.columns else 0.0
    l2_dc = sum(float(by_level[c].sum()) for c in ("L2", "DC") if c in by_level.columns)
    loss = l1 - l2_dc
    render_kpi_row(
        [
            Kpi("A1 SUPPLY (L1)", f"{l1:,.0f} m³"),
            Kpi("A2 (L2 + DC)", f"{l2_dc:,.0f} m³"),
            Kpi("STAGE 1 LOSS", f"{loss:,.0f} m³", f"{(loss / l1 * 100) if l1 else 0:.1f}% of supply"),
            Kpi("METERS", str(len(meters))),
        ]
    )

    if len(by_level):
        line_chart(by_level.reset_index(), x="month", y=list(by_level.columns), title="Consumption by level", y_title="m³")
    bar_chart(agg.water_by_zone(meters), x="zone", y="consumption", title="Building (L3) consumption by zone", y_title="m³")

    with st.expander("Meters"):
        rows = []
        for m in meters:
            row = {k: v for k, v in m.as_dict().items() if k != "consumption"}
            row.update(m.consumption)
            rows.append(row)
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
