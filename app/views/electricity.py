from __future__ import annotations

import streamlit as st

from components.header import render_source_badge
from components.metrics import Kpi, bar_chart, render_kpi_row
from config import AppConfig
from data import aggregations as agg
from data.service import get_electricity_meters


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Electricity")

    if st.button("Refresh", key="electricity_refresh"):
        st.rerun()

    with st.spinner("Loading meters..."):
        result = get_electricity_meters(cfg, use_mock)
    render_source_badge(result)

    meters = result.data
    types = sorted({m.type or "Unknown" for m in meters})
    pick = st.selectbox("Meter type", ["All"] + types)
    if pick != "All":
        meters = [m for m in meters if (m.type or "Unknown") == pick]

    rate = cfg.electricity_rate_per_kwh
    s = agg.electricity_summary(meters, rate)
    render_kpi_row(
        [
            Kpi("TOTAL CONSUMPTION", f"{s.total_kwh / 1000:,.1f} MWh"),
            Kpi("TOTAL COST", f"{s.total_cost:,.0f} OMR", f"@ {rate} OMR/kWh"),
            Kpi("METER COUNT", str(s.meter_count), "Active Meters"),
            Kpi("HIGHEST CONSUMER", s.highest_name, f"{s.highest_kwh:,.0f} kWh"),
        ]
    )

    bar_chart(agg.electricity_monthly(meters), x="month", y="consumption", title="Monthly consumption", y_title="kWh")
    if pick == "All":
        bar_chart(agg.electricity_by_type(meters), x="type", y="consumption", title="Consumption by type", y_title="kWh")

    with st.expander("Meter readings"):
        df = agg.electricity_long(meters)
        if len(df):
            wide = df.pivot_table(index=["name", "type"], columns="month", values="kwh", aggfunc="sum")
            st.dataframe(wide[agg.sort_months(wide.columns)], use_container_width=True)
        else:
            st.info("No readings.")
