"""Treatment cost calculator page."""

import sys
from pathlib import Path

import streamlit as st
import plotly.express as px

# Add app directory to path for component imports
app_dir = Path(__file__).parent.parent
if str(app_dir) not in sys.path:
    sys.path.insert(0, str(app_dir))

from oncoguide.core.entities import CareTier, IncomeBand, Stage, Treatment
from oncoguide.core.numeric import format_number
from oncoguide.results.costs import (
    CostConfig,
    compare_treatments,
    estimate,
    format_currency,
    is_subsidy_eligible,
)
from components.cost_summary import render_cost_summary

st.set_page_config(page_title="Cost Calculator - OncoGuide", page_icon="💰", layout="wide")

st.title("💰 Treatment Cost Calculator")

st.caption("Annual estimates in SGD. Actual bills depend on your hospital, "
           "drugs used and policy details.")

STAGE_LABELS = {
    "early": "Early (Stage I-II)",
    "advanced": "Advanced (Stage III)",
    "metastatic": "Metastatic (Stage IV)",
}
TIER_LABELS = {
    "public-sub": "Public hospital, subsidised ward",
    "public-priv": "Public hospital, private ward",
    "private": "Private hospital",
}
TREATMENT_LABELS = {
    "surgery": "Surgery only",
    "chemo": "Chemotherapy",
    "radiation": "Radiotherapy",
    "surgery-chemo": "Surgery + chemotherapy",
    "surgery-chemo-rad": "Surgery + chemo + radiotherapy",
    "targeted": "Targeted therapy",
    "immuno": "Immunotherapy",
    "combined": "Combined drug regimen",
}


def format_band(band: str) -> str:
    """Display label for a PCHI band code, e.g. "1201-2000" -> "$1,201 - $2,000"."""
    if band == IncomeBand.ABOVE_6500:
        return "Above $6,500"
    low, high = band.split("-")
    return f"${format_number(int(low))} - ${format_number(int(high))}"


# Initialize session state
if "cost_selection" not in st.session_state:
    st.session_state.cost_selection = None

col1, col2 = st.columns(2)

with col1:
    stage = st.selectbox(
        "Cancer stage",
        options=[s.value for s in Stage],
        index=1,
        format_func=STAGE_LABELS.get,
    )
    care_tier = st.selectbox(
        "Care setting",
        options=[t.value for t in CareTier],
        format_func=TIER_LABELS.get,
    )

with col2:
    treatment = st.selectbox(
        "Treatment",
        options=[t.value for t in Treatment],
        format_func=TREATMENT_LABELS.get,
    )
    income_band = st.selectbox(
        "Monthly per-capita household income (PCHI)",
        options=[b.value for b in IncomeBand],
        format_func=format_band,
    )

if st.button("Calculate Estimate", type="primary", use_container_width=True):
    st.session_state.cost_selection = (stage, care_tier, treatment, income_band)

if st.session_state.cost_selection is None:
    st.info("Choose your options and press **Calculate Estimate**.")
    st.stop()

stage, care_tier, treatment, income_band = st.session_state.cost_selection
config = CostConfig()

st.divider()
st.header("Your Estimate")

breakdown = estimate(stage, care_tier, treatment, income_band, config)
render_cost_summary(breakdown, is_subsidy_eligible(care_tier, treatment))

# ===== COMPARISON =====
st.divider()
st.header("Compare Treatments")
st.caption(f"{STAGE_LABELS[stage]} | {TIER_LABELS[care_tier]}")

comparison = compare_treatments(stage, care_tier, income_band, config)
comparison["label"] = comparison["treatment"].map(TREATMENT_LABELS)

chart_df = comparison.melt(
    id_vars=["label"],
    value_vars=["out_of_pocket", "insurance_coverage", "subsidy"],
    var_name="component",
    value_name="amount",
)
chart_df["component"] = chart_df["component"].map({
    "out_of_pocket": "Out-of-pocket",
    "insurance_coverage": "MediShield Life",
    "subsidy": "MAF subsidy",
})

fig = px.bar(
    chart_df,
    x="amount",
    y="label",
    color="component",
    orientation="h",
    labels={"amount": f"Annual cost ({config.currency})", "label": ""},
    color_discrete_map={
        "Out-of-pocket": "#ef4444",
        "MediShield Life": "#3b82f6",
        "MAF subsidy": "#22c55e",
    },
)
fig.update_layout(height=400, yaxis=dict(categoryorder="total ascending"))
st.plotly_chart(fig, use_container_width=True)

symbol = config.get_currency_symbol()
table = comparison[["label", "gross", "insurance_coverage", "subsidy", "out_of_pocket"]].copy()
for column in ["gross", "insurance_coverage", "subsidy", "out_of_pocket"]:
    table[column] = table[column].map(lambda v: format_currency(v, symbol))
table.columns = ["Treatment", "Gross", "MediShield Life", "MAF Subsidy", "Out-of-Pocket"]
st.dataframe(table, hide_index=True, use_container_width=True)
