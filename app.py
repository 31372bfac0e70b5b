import streamlit as st
from core import actions
from core.encoder import EXPORT_FILENAME, XLSX_MIME, to_xlsx_bytes
from core.registry import load_config, load_enabled_modules
from core.report import build_pdf
from core.state import DashboardState
from core.utils import color_box, configure_logging

cfg = load_config()
configure_logging(cfg.get("logging", {}).get("level", "INFO"))

st.set_page_config(page_title="MOGC Dashboard", layout="wide")
st.title("MOGC Dashboard")
st.caption("Overview of Diabetes Control Performance")

# 1) One state object per browser session; first run loads from the sheet
if "dashboard" not in st.session_state:
    st.session_state.dashboard = DashboardState(timeout=float(cfg.get("source", {}).get("timeout", 15)))
state: DashboardState = st.session_state.dashboard
if not state.loaded:
    with st.spinner("Loading patients..."):
        actions.refresh(state)

# 2) Toolbar
b1, b2, b3, b4 = st.columns(4)
with b1:
    if st.button("Refresh Data", use_container_width=True):
        with st.spinner("Refreshing..."):
            actions.refresh(state)
with b2:
    up = st.file_uploader("Import Excel", type=["xlsx", "xls"], label_visibility="collapsed")
    if up is not None and st.session_state.get("imported") != up.file_id:
        st.session_state.imported = up.file_id
        err = actions.import_file(state, up)
        if err:
            st.error(err)
with b3:
    if state.records:
        st.download_button(
            "Export Report", data=to_xlsx_bytes(state.records), file_name=EXPORT_FILENAME,
            mime=XLSX_MIME, use_container_width=True,
        )
    elif st.button("Export Report", use_container_width=True):
        st.warning("No data to export.")
with b4:
    if state.records:
        st.download_button(
            "Summary PDF", data=build_pdf(state.records), file_name="MOGC_Summary.pdf",
            mime="application/pdf", use_container_width=True,
        )

# 3) Error banner / empty state
if state.error:
    color_box(f"Error loading data<br/><span style='font-weight:400'>{state.error}</span>", level="high")
    if st.button("Retry"):
        actions.refresh(state)
        st.rerun()
elif not state.records:
    st.info("Upload your MOGC Excel file to get started")

if state.row_warnings:
    st.caption(f"{state.row_warnings} row(s) in {state.source} were skipped or truncated.")

# 4) Tabs
if state.records:
    modules = load_enabled_modules(cfg)
    for mod, tab in zip(modules, st.tabs([m.title for m in modules])):
        with tab:
            mod.render(state)
