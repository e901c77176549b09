from __future__ import annotations

import streamlit as st

from components.header import render_source_badge
from components.metrics import Kpi, render_kpi_row
from config import AppConfig
from data import aggregations as agg
from data.service import get_assets, get_contractors, get_electricity_meters, get_stp_operations, get_water_meters


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Overview")
    st.caption("One line per system. Each dataset is loaded independently and may be live or demo.")

    with st.spinner("Loading datasets..."):
        assets = get_assets(cfg, use_mock, page=1, page_size=1)
        contractors = get_contractors(cfg, use_mock)
        elec = get_electricity_meters(cfg, use_mock)
        stp = get_stp_operations(cfg, use_mock)
        water = get_water_meters(cfg, use_mock)

    e = agg.electricity_summary(elec.data, cfg.electricity_rate_per_kwh)
    s = agg.stp_stats(stp.data, cfg.stp_tanker_fee, cfg.stp_tse_saving_rate)
    expiring = agg.contractors_expiring(contractors.data, within_days=90)

    render_kpi_row(
        [
            Kpi("ASSETS", f"{assets.data.count:,}", "registered"),
            Kpi("CONTRACTS EXPIRING", str(len(expiring)), "next 90 days"),
            Kpi("ELECTRICITY", f"{e.total_kwh / 1000:,.1f} MWh", f"{e.meter_count} meters"),
            Kpi("STP IMPACT", f"{s.total_economic_impact:,.0f} OMR", f"{s.treatment_efficiency:.1f}% efficiency"),
            Kpi("WATER METERS", str(len(water.data)), "L1-L4 / DC"),
        ]
    )

    st.divider()
    st.subheader("Data sources")
    for name, result in [
        ("Assets", assets),
        ("Contractors", contractors),
        ("Electricity", elec),
        ("STP", stp),
        ("Water", water),
    ]:
        c1, c2 = st.columns([1, 4])
        c1.markdown(f"**{name}**")
        with c2:
            render_source_badge(result)
