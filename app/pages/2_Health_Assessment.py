"""Health assessment page: collects and saves a session health profile."""

from datetime import date

import streamlit as st

from oncoguide.core.entities import ActivityLevel, SmokingStatus
from oncoguide.model.profile import FLAG_CONDITIONS, HealthProfile, load_profile

st.set_page_config(page_title="Health Assessment - OncoGuide", page_icon="🩺", layout="wide")

st.title("🩺 Health Assessment")

st.markdown("""
Tell us about your general health. Your answers stay in this browser
session only and are used to tailor survival estimates.
""")

CONDITION_LABELS = {
    "diabetes": "Diabetes",
    "hypertension": "High blood pressure",
    "heartDisease": "Heart disease",
    "kidneyDisease": "Chronic kidney disease",
    "liverDisease": "Liver disease",
    "copd": "COPD",
}

# Restore a previously saved profile
saved = load_profile(st.session_state.get("health_profile")) or HealthProfile()

with st.form("assessment-form"):
    st.subheader("Existing conditions")
    cond_cols = st.columns(3)
    checked = {}
    for i, condition in enumerate(FLAG_CONDITIONS):
        with cond_cols[i % 3]:
            checked[condition.value] = st.checkbox(
                CONDITION_LABELS[condition.value],
                value=condition.value in saved.conditions,
            )

    st.subheader("Lifestyle")
    col1, col2 = st.columns(2)

    smoking_options = [s.value for s in SmokingStatus]
    with col1:
        smoking_status = st.radio(
            "Smoking",
            options=smoking_options,
            index=smoking_options.index(saved.smoking_status)
            if saved.smoking_status in smoking_options else len(smoking_options) - 1,
            format_func=str.capitalize,
            horizontal=True,
        )

    activity_options = [a.value for a in ActivityLevel]
    with col2:
        activity_level = st.radio(
            "Physical activity",
            options=activity_options,
            index=activity_options.index(saved.activity_level)
            if saved.activity_level in activity_options else 1,
            format_func=str.capitalize,
            horizontal=True,
        )

    birth_date = st.date_input(
        "Date of birth",
        value=date.fromisoformat(saved.birth_date) if saved.age() is not None else None,
        min_value=date(1900, 1, 1),
        max_value=date.today(),
    )

    submitted = st.form_submit_button("Save profile", type="primary")

if submitted:
    form_data = dict(checked)
    form_data["smokingStatus"] = smoking_status
    form_data["activityLevel"] = activity_level
    if birth_date is not None:
        form_data["birthDate"] = birth_date.isoformat()

    profile = HealthProfile.from_form(form_data)
    st.session_state.health_profile = profile.to_json()

    st.success("""
    **Assessment complete.** Your health profile has been saved for this
    session. You can now explore survival rates and treatment options
    tailored to your profile.
    """)
    age = profile.age()
    if age is not None:
        st.caption(f"Age: {age}")
    risk_factors = profile.comorbidities()
    if risk_factors:
        st.caption(f"Risk factors recorded: {', '.join(risk_factors)}")

    st.page_link("pages/3_Survival_Rates.py", label="View Survival Rates", icon="📈")
    st.page_link("pages/4_Cost_Calculator.py", label="View Treatment Costs", icon="💰")
