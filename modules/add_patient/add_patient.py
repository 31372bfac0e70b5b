import streamlit as st
from core import actions
from core.calculator import derive_fields
from core.state import DashboardState
from core.utils import dash

id = "add_patient"
title = "Add Patient"

FIELDS = ("new_name", "new_ic", "new_height", "new_weight")


def missing_fields(values: dict) -> list[str]:
    return [k for k in FIELDS if not str(values.get(k, "")).strip()]


def _submit(state: DashboardState) -> None:
    values = {k: st.session_state.get(k, "") for k in FIELDS}
    if missing_fields(values):
        st.session_state["add_patient_flash"] = ("error", "Please fill in all fields.")
        return
    err = actions.add_patient(
        state,
        name=values["new_name"],
        ic=values["new_ic"],
        height=values["new_height"],
        weight=values["new_weight"],
    )
    if err:
        # keep the typed values so the user can resubmit
        st.session_state["add_patient_flash"] = ("error", err)
        return
    for k in FIELDS:
        st.session_state[k] = ""
    st.session_state["add_patient_flash"] = ("success", "Patient added successfully!")


def render(state: DashboardState) -> None:
    st.subheader("Add New Patient")

    c1, c2 = st.columns(2)
    with c1:
        st.text_input("Name", key="new_name", placeholder="Full Name")
        st.text_input("Height (Meters)", key="new_height", placeholder="e.g. 1.75")
    with c2:
        st.text_input("IC Number", key="new_ic", placeholder="e.g. 800101011234")
        st.text_input("Weight (KG)", key="new_weight", placeholder="e.g. 70.5")

    derived = derive_fields(
        st.session_state.get("new_ic", ""),
        st.session_state.get("new_height", ""),
        st.session_state.get("new_weight", ""),
    )
    p1, p2, p3 = st.columns(3)
    p1.metric("Calculated Age", dash(derived.age))
    p2.metric("Gender", dash(derived.gender))
    p3.metric("BMI", dash(derived.bmi))

    st.button("Save Patient", type="primary", use_container_width=True, on_click=_submit, args=(state,))

    flash = st.session_state.pop("add_patient_flash", None)
    if flash:
        kind, msg = flash
        if kind == "success":
            st.success(msg)
        else:
            st.error(msg)
