# ui/sections/validation.py
import streamlit as st
from ui.validators import validate


def render_validation(cfg):
    errors, warnings = validate(cfg)
    n_err, n_warn = len(errors), len(warnings)

    if n_err:
        st.error(f"Story settings have {n_err} error(s). Fix them to render the charts.")
    elif n_warn:
        st.warning(f"Story settings are valid, but have {n_warn} warning(s).")

    if errors:
        with st.expander("Show errors", expanded=True):
            for e in errors:
                st.error(e)

    if warnings:
        with st.expander("Show warnings", expanded=(n_err == 0)):
            for w in warnings:
                st.warning(w)

    return errors, warnings
