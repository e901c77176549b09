from __future__ import annotations

import pandas as pd
import streamlit as st

from components.header import render_source_badge
from components.metrics import Kpi, bar_chart, line_chart, render_kpi_row
from config import AppConfig
from data import aggregations as agg
from data.service import get_stp_operations


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Sewage Treatment Plant")

    if st.button("Refresh", key="stp_refresh"):
        st.rerun()

    with st.spinner("Loading STP operations..."):
        result = get_stp_operations(cfg, use_mock)
    render_source_badge(result)

    ops = result.data
    months = sorted({o.date[:7] for o in ops})
    if len(months) > 1:
        start, end = st.select_slider("Period", options=months, value=(months[0], months[-1]))
        ops = [o for o in ops if start <= o.date[:7] <= end]

    fee, rate = cfg.stp_tanker_fee, cfg.stp_tse_saving_rate
    s = agg.stp_stats(ops, fee, rate)
    render_kpi_row(
        [
            Kpi("INLET SEWAGE", f"{s.total_inlet:,.0f} m³", f"{s.daily_average_inlet:,.0f} m³/day"),
            Kpi("TSE FOR IRRIGATION", f"{s.total_tse:,.0f} m³", f"{s.treatment_efficiency:.1f}% efficiency"),
            Kpi("TANKER TRIPS", f"{s.total_trips:,.0f}"),
            Kpi("INCOME", f"{s.generated_income:,.0f} OMR", f"@ {fee} OMR/trip"),
            Kpi("WATER SAVINGS", f"{s.water_savings:,.0f} OMR", f"@ {rate} OMR/m³"),
            Kpi("ECONOMIC IMPACT", f"{s.total_economic_impact:,.0f} OMR"),
        ]
    )

    monthly = agg.stp_monthly(ops, fee, rate)
    line_chart(monthly, x="month", y=["inlet", "tse"], title="Monthly volumes", y_title="m³")
    bar_chart(monthly, x="month", y=["income", "savings"], title="Monthly economic impact", y_title="OMR", barmode="stack")

    st.subheader("Daily log")
    if ops:
        month = st.selectbox("Month", sorted({o.date[:7] for o in ops}, reverse=True))
        daily = [o.as_dict() for o in ops if o.date[:7] == month]
        df = pd.DataFrame(daily).sort_values("date", ascending=False)
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("No operations recorded.")
