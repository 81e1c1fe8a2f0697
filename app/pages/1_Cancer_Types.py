"""Cancer types catalogue page."""

import streamlit as st

from oncoguide.core.entities import Gender, SortOrder
from oncoguide.model.catalogue import DEFAULT_CATALOGUE, filter_and_sort

st.set_page_config(page_title="Cancer Types - OncoGuide", page_icon="🎗️", layout="wide")

st.title("🎗️ Cancer Types")

col1, col2 = st.columns(2)

with col1:
    gender = st.selectbox(
        "Show cancers affecting",
        options=[Gender.ALL.value, Gender.FEMALE.value, Gender.MALE.value],
        format_func=lambda g: {"all": "Everyone", "female": "Women", "male": "Men"}[g],
    )

with col2:
    order = st.selectbox(
        "Sort by",
        options=[s.value for s in SortOrder],
        format_func=lambda s: {
            "prevalence": "Most common",
            "survival": "Highest survival",
            "alpha": "Name (A-Z)",
        }[s],
    )

cards = filter_and_sort(DEFAULT_CATALOGUE, gender, order)

if not cards:
    st.warning("No cancer types match this filter.")
    st.stop()

card_cols = st.columns(len(cards))
for col, card in zip(card_cols, cards):
    with col:
        with st.container(border=True):
            st.subheader(card.name)
            if card.prevalence_rank is not None:
                st.caption(f"#{card.prevalence_rank} most common")
            if card.survival is not None:
                st.metric(
                    "5-year survival",
                    f"{card.survival}%",
                    help="Stage I, 5 years after diagnosis",
                )
            if card.cancer_type is not None:
                st.page_link(
                    "pages/3_Survival_Rates.py",
                    label="Survival by stage",
                    icon="📈",
                )
