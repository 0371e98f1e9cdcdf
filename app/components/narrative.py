from __future__ import annotations

import streamlit as st


def render_chart_intro(category: str, title: str, context: str | None = None) -> None:
    """
    Top of every detail page:
    - category label
    - chart title
    - optional one-line description of the data
    """
    st.markdown(
        f"""
<div class="chart-intro">
  <div class="chart-intro-category">{category}</div>
  <div class="chart-intro-title">{title}</div>
  {f'<div class="chart-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_chart_annotation(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout callout-annot">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_hint(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout callout-hint">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
