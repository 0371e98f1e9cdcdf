from __future__ import annotations

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="gallery-header">
  <div>
    <div class="gallery-title">{app_name}</div>
    <div class="gallery-subtitle">{subtitle}</div>
  </div>
  <div class="pill"><span class="dot"></span>{right_pill}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
