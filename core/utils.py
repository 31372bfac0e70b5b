import logging
import streamlit as st
from typing import Optional

PALETTE = {
    "high": "#c62828",
    "info": "#455a64",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def color_box(text: str, level: str = "info"):
    col = PALETTE.get(level, "#455a64")
    st.markdown(
        f"""
        <div style=\"background:{col};padding:12px;border-radius:8px;color:white;font-weight:600;\">{text}</div>
        """,
        unsafe_allow_html=True,
    )


def stat_card(label: str, value: int, caption: Optional[str] = None):
    st.metric(label, value)
    if caption:
        st.caption(caption)


def dash(value) -> str:
    return "-" if value is None or value == "" else str(value)
