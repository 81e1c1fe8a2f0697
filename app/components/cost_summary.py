"""Cost summary component.

Renders a CostBreakdown as four metrics: gross cost, insurance coverage,
subsidy and out-of-pocket.
"""

import streamlit as st

from oncoguide.results.costs import CostBreakdown


def render_cost_summary(breakdown: CostBreakdown, subsidy_eligible: bool = True):
    """Render the four-field cost breakdown.

    Args:
        breakdown: Estimate to display.
        subsidy_eligible: If False, the subsidy metric explains why it is zero.
    """
    display = breakdown.to_display()

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Gross Cost", display["gross"], help="Annual estimate before support")

    with col2:
        st.metric(
            "MediShield Life",
            display["insurance_coverage"],
            help="Estimated insurance coverage for this care tier",
        )

    with col3:
        st.metric(
            "MAF Subsidy",
            display["subsidy"],
            help="Means-tested subsidy on eligible drug regimens",
        )
        if not subsidy_eligible:
            st.caption("Only targeted, immunotherapy and combined regimens "
                       "in subsidised public care qualify.")

    with col4:
        st.metric("Out-of-Pocket", display["out_of_pocket"])
        st.caption(f"{breakdown.out_of_pocket_share:.0%} of gross cost")
