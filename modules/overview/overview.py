import pandas as pd
import streamlit as st
from core.state import DashboardState
from core.stats import compute_stats, diabetes_type_breakdown, percent_of_total
from core.utils import stat_card

id = "overview"
title = "Overview"


def chart_frames(state: DashboardState):
    stats = compute_stats(state.records)
    control = pd.DataFrame(
        {"total": [stats.bmi_normal, stats.hba1c_controlled]},
        index=["BMI < 25", "HbA1c < 6.5"],
    )
    breakdown = diabetes_type_breakdown(state.records)
    types = pd.DataFrame({"patients": list(breakdown.values())}, index=list(breakdown.keys()))
    return stats, control, types


def render(state: DashboardState) -> None:
    stats, control, types = chart_frames(state)

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        stat_card("Total Patients", stats.total)
    with c2:
        stat_card("Active Patients", stats.active)
    with c3:
        stat_card("HbA1c < 6.5%", stats.hba1c_controlled, f"{percent_of_total(stats.hba1c_controlled, stats.total)}% of total")
    with c4:
        stat_card("Normal BMI", stats.bmi_normal, f"{percent_of_total(stats.bmi_normal, stats.total)}% of total")

    left, right = st.columns([4, 3])
    with left:
        st.subheader("Overview")
        st.bar_chart(control)
    with right:
        st.subheader("Diabetes Type")
        st.bar_chart(types)
