from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    subtitle: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            sub_html = f'<div class="metric-sub">{k.subtitle}</div>' if k.subtitle else ""
            st.markdown(
                f"""
<div class="metric-card">
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
  {sub_html}
</div>
                """,
                unsafe_allow_html=True,
            )


def _apply_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(color=THEME["text_primary"]),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        colorway=[THEME["accent_primary"], THEME["navy_800"], THEME["accent_secondary"], "#6B7280", "#9CA3AF"],
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
        title_font=dict(color=THEME["navy_900"], size=16),
    )
    fig.update_xaxes(title_text=x_title, gridcolor=THEME["grid"], zeroline=False)
    fig.update_yaxes(title_text=y_title, gridcolor=THEME["grid"], zeroline=False)
    return fig


def bar_chart(df: pd.DataFrame, x: str, y, title: str = "", y_title: Optional[str] = None, barmode: str = "group") -> None:
    if df is None or not len(df):
        st.info("Nothing to chart yet.")
        return
    fig = px.bar(df, x=x, y=y, title=title, barmode=barmode)
    st.plotly_chart(_apply_theme(fig, x_title=x, y_title=y_title or ""), use_container_width=True)


def line_chart(df: pd.DataFrame, x: str, y, title: str = "", y_title: Optional[str] = None) -> None:
    if df is None or not len(df):
        st.info("Nothing to chart yet.")
        return
    fig = px.line(df, x=x, y=y, title=title, markers=True)
    fig.update_traces(line=dict(width=2))
    st.plotly_chart(_apply_theme(fig, x_title=x, y_title=y_title or ""), use_container_width=True)
