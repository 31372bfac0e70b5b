import pandas as pd
import streamlit as st
from typing import List
from core.filters import filter_records
from core.state import DashboardState
from core.types import PatientRecord
from core.utils import dash

id = "patients"
title = "Patients List"


def _hba1c(r: PatientRecord) -> str:
    if r.hba1c_date:
        return f"{dash(r.hba1c)} ({r.hba1c_date})"
    return dash(r.hba1c)


def table(records: List[PatientRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Name": dash(r.name),
                "IC": dash(r.ic),
                "Age": dash(r.age),
                "Gender": dash(r.gender),
                "Diabetes Type": dash(r.diabetes_type),
                "HbA1c": _hba1c(r),
                "BMI": dash(r.bmi),
                "Status": dash(r.status),
            }
            for r in records
        ],
        columns=["Name", "IC", "Age", "Gender", "Diabetes Type", "HbA1c", "BMI", "Status"],
    )


def render(state: DashboardState) -> None:
    st.subheader("Patient Registry")
    term = st.text_input("Search", placeholder="Search by Name or IC...", key="patient_search")
    shown = filter_records(state.records, term)

    if shown:
        st.dataframe(table(shown), use_container_width=True, hide_index=True)
    else:
        st.info("No patients found.")
    st.caption(f"Showing {len(shown)} of {len(state.records)} patients")
