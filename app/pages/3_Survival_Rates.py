"""Survival rates page: survival by stage over time, optionally adjusted."""

import streamlit as st
import plotly.graph_objects as go

from oncoguide.core.entities import CancerType
from oncoguide.core.tables import STAGE_COLOURS
from oncoguide.model.profile import load_profile
from oncoguide.model.survival import adjusted_survival_curve, combined_hazard_ratio

st.set_page_config(page_title="Survival Rates - OncoGuide", page_icon="📈", layout="wide")

st.title("📈 Survival Rates")

profile = load_profile(st.session_state.get("health_profile"))
comorbidities = profile.comorbidities() if profile is not None else []

col1, col2 = st.columns([2, 1])

with col1:
    cancer = st.selectbox(
        "Cancer type",
        options=[c.value for c in CancerType],
        format_func=str.capitalize,
    )

with col2:
    adjust = st.toggle(
        "Adjust for my health profile",
        value=False,
        disabled=not comorbidities,
        help="Save a health assessment with at least one risk factor to enable",
    )

df = adjusted_survival_curve(cancer, comorbidities)

# ===== SURVIVAL CHART =====
fig = go.Figure()

for stage, stage_df in df.groupby("stage", sort=False):
    colour = STAGE_COLOURS[stage]
    fig.add_trace(go.Scatter(
        x=stage_df["timepoint"],
        y=stage_df["survival"],
        name=stage,
        mode="lines+markers",
        line=dict(color=colour),
        fill="tozeroy" if not adjust else None,
        hovertemplate="%{y}% survival<extra>" + stage + "</extra>",
    ))
    if adjust:
        fig.add_trace(go.Scatter(
            x=stage_df["timepoint"],
            y=stage_df["adjusted"],
            name=f"{stage} (adjusted)",
            mode="lines+markers",
            line=dict(color=colour, dash="dash"),
            hovertemplate="%{y}% adjusted<extra>" + stage + "</extra>",
        ))

fig.update_layout(
    title="Survival Rate by Stage Over Time",
    xaxis_title="Time since diagnosis",
    yaxis_title="Survival Rate (%)",
    yaxis=dict(range=[0, 100]),
    hovermode="x unified",
    height=450,
)

st.plotly_chart(fig, use_container_width=True)

if adjust:
    ratio = combined_hazard_ratio(comorbidities)
    st.caption(
        f"Adjusted for: {', '.join(comorbidities)} (combined hazard ratio {ratio:.2f}). "
        "Adjusted values never fall below 5%."
    )

# ===== DATA TABLE =====
with st.expander("Show data"):
    value_col = "adjusted" if adjust else "survival"
    table = df.pivot(index="stage", columns="timepoint", values=value_col)
    st.dataframe(table[df["timepoint"].unique()], use_container_width=True)
