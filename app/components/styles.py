from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Chart Gallery"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📈",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --ink-900: __INK_900__;
  --ink-800: __INK_800__;

  --bg-primary: __BG_PRIMARY__;     /* grouped list background */
  --bg-secondary: __BG_SECONDARY__; /* sidebar / header */
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --grid: __GRID__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  font-family: -apple-system, BlinkMacSystemFont, system-ui, "Segoe UI", Roboto, Arial, sans-serif !important;
  color: var(--text-primary) !important;
}

[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}

/* Sidebar category list */
[data-testid="stSidebar"] div[role="radiogroup"] > label{
  background: var(--card-bg) !important;
  border: 1px solid var(--card-border) !important;
  border-radius: 10px !important;
  padding: 8px 12px !important;
  margin: 0 0 8px 0 !important;
}
[data-testid="stSidebar"] div[role="radiogroup"] > label:has(input:checked){
  border-color: var(--accent) !important;
  box-shadow: 0 1px 3px rgba(10,132,255,0.18) !important;
}

.block-container{
  padding-top: 0.75rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.gallery-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.gallery-title{
  font-size: 22px;
  font-weight: 700;
  color: var(--ink-900);
  line-height: 1.1;
}
.gallery-subtitle{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
}
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  background: white;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--ink-800);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--accent);
  display:inline-block;
}

/* Gallery list */
.category-title{
  font-size: 13px;
  font-weight: 600;
  letter-spacing: 0.04em;
  text-transform: uppercase;
  color: var(--text-secondary);
  margin: 18px 0 8px 4px;
}
.chart-card-title{
  font-size: 16px;
  font-weight: 600;
  color: var(--ink-900);
  margin: 4px 0 4px 2px;
}

/* Metric cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
}
.metric-label{
  font-size: 14px;
  font-weight: 500;
  color: var(--text-secondary);
  margin-bottom: 6px;
}
.metric-value{
  font-size: 24px;
  font-weight: 700;
  color: var(--text-primary);
  line-height: 1.2;
}
div.stButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
}
div.stButton > button[kind="primary"]{
  background: var(--accent) !important;
  border-color: var(--accent) !important;
}
div.stButton > button[kind="primary"]:hover{
  background: var(--accent-hover) !important;
}

details{
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  padding: 8px 10px;
}

/* Charts sit on card surfaces */
div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}

/* Detail page intro + callouts */
.chart-intro{
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 14px 14px;
  margin: 0 0 14px 0;
}
.chart-intro-category{
  font-size: 13px;
  font-weight: 600;
  color: var(--ink-800);
  margin-bottom: 4px;
}
.chart-intro-title{
  font-size: 20px;
  font-weight: 700;
  color: var(--ink-900);
  margin-bottom: 6px;
}
.chart-intro-context{
  font-size: 14px;
  color: var(--text-secondary);
  line-height: 1.5;
}

.callout{
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
  margin: 10px 0;
  background: #FFFFFF;
}
.callout-title{
  font-size: 14px;
  font-weight: 700;
  color: var(--ink-900);
  margin-bottom: 6px;
}
.callout-body{
  font-size: 14px;
  color: var(--text-secondary);
  line-height: 1.5;
}
.callout-annot{ border-left: 4px solid var(--ink-800); }
.callout-hint{ border-left: 4px solid var(--accent); }
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__INK_900__": str(THEME["navy_900"]),
        "__INK_800__": str(THEME["navy_800"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__GRID__": str(THEME["grid"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
