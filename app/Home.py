"""OncoGuide - Home page."""

import streamlit as st

from oncoguide.model.profile import load_profile

st.set_page_config(
    page_title="OncoGuide",
    page_icon="",
    layout="wide",
)

st.title("OncoGuide: Cancer Information & Cost Planning")

st.markdown("""
## What is OncoGuide?

**OncoGuide** brings together plain-language information about common
cancers, survival statistics by stage, and a treatment cost estimator
for public and private care.

### What OncoGuide shows:
- How survival changes by **stage** and over **time** after diagnosis
- How existing health conditions can **shift** those numbers
- What a course of treatment may **cost** after insurance and subsidies

---

**Use the sidebar** to navigate:
1. **Cancer Types** - Browse and filter common cancers
2. **Health Assessment** - Save a health profile for this session
3. **Survival Rates** - Survival curves by stage, optionally adjusted
4. **Cost Calculator** - Estimate treatment costs
""")

st.info("""
**Disclaimer:** Figures are simplified population estimates for general
information only. Discuss your own prognosis and costs with your care team.
""")

# Show profile status if one was saved this session
profile = load_profile(st.session_state.get("health_profile"))
if profile is not None:
    n_conditions = len(profile.comorbidities())
    st.success(
        f"Health profile saved for this session ({n_conditions} risk factor(s)). "
        "Survival Rates can adjust for it."
    )
