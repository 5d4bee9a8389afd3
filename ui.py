import logging

import streamlit as st

logger = logging.getLogger(__name__)


def inject_css():
    try:
        with open("assets/styles.css", "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except OSError:
        logger.debug("no assets/styles.css, using default theme")


def app_header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def progress_bar(step: int, total: int, fraction: float):
    st.progress(fraction)
    st.caption(f"Step {step + 1} of {total}")


def step_header(title: str, explainer: str = ""):
    st.markdown(f"### {title}")
    if explainer:
        st.write(explainer)


def small_help(text: str):
    st.caption(text)


def option_buttons(options, key_prefix: str, selected=None):
    """One full-width button per (key, title, description); returns the clicked key."""
    clicked = None
    for letter, (key, title, desc) in zip("ABCDEFGH", options):
        mark = " ✓" if key == selected else ""
        if st.button(f"{letter}. {title}{mark}: {desc}", key=f"{key_prefix}_{key}",
                     use_container_width=True):
            clicked = key
    return clicked


def kpi_card(col, caption: str, value: str, note: str = ""):
    extra = f"<div class='caption'>{note}</div>" if note else ""
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{extra}</div>",
        unsafe_allow_html=True,
    )


def error_text(msg: str):
    if msg:
        st.error(msg)
