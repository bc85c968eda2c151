# styles.py — Indigo card theme (presentation-only)
from __future__ import annotations
import streamlit as st

# ---- Design Tokens -----------------------------------------------------------
PALETTE = {
    # Core
    "bg_top": "#FAF5FF",      # purple-50
    "bg_bottom": "#F3E8FF",   # purple-100
    "text": "#111827",
    "muted": "#6B7280",
    # Surfaces
    "panel": "#FFFFFF",
    "panel_border": "rgba(99,102,241,0.10)",
    "badge_border": "rgba(148,163,184,0.22)",
    "divider": "rgba(99,102,241,0.22)",
    # Brand
    "indigo": "#4F46E5",      # indigo-600
    "indigo_dark": "#4338CA", # indigo-700
    "indigo_soft": "#A5B4FC", # indigo-300
    "indigo_text": "#C7D2FE", # indigo-200
    # Series
    "confirmed": "#06B6D4",   # cyan-500
    "deaths": "#EF4444",      # red-500
    "recovered": "#22C55E",   # green-500
}

BADGE_BG = {
    "confirmed": "#ECFEFF",
    "deaths": "#FEF2F2",
    "recovered": "#F0FDF4",
}

PLOT_TEMPLATE = "plotly_white"
PLOT_BG = "rgba(0,0,0,0)"  # transparent

# ---- Global CSS ---------------------------------------------------------------
def inject_base_css():
    """Global, presentation-only CSS. Safe to re-run; no app logic."""
    st.markdown(
        f"""
<style>
:root {{
  --cv-text: {PALETTE["text"]};
  --cv-muted: {PALETTE["muted"]};
  --cv-panel: {PALETTE["panel"]};
  --cv-panel-border: {PALETTE["panel_border"]};
  --cv-divider: {PALETTE["divider"]};
  --cv-indigo: {PALETTE["indigo"]};
  --cv-indigo-dark: {PALETTE["indigo_dark"]};
}}

html, body, [class*="css"] {{
  font-family: Inter, ui-sans-serif, system-ui, -apple-system, "Segoe UI", Roboto, Helvetica, Arial;
  color: var(--cv-text);
}}
[data-testid="stAppViewContainer"] {{
  background: linear-gradient(180deg, {PALETTE["bg_top"]} 0%, {PALETTE["bg_bottom"]} 100%) fixed;
}}
.block-container {{ padding-top: 1.2rem; padding-bottom: 2rem; }}

 /* ---------- Sidebar (indigo rail) ---------- */
section[data-testid="stSidebar"] {{
  background: {PALETTE["indigo_dark"]};
  border-radius: 0 24px 24px 0;
}}
section[data-testid="stSidebar"] * {{ color: {PALETTE["indigo_soft"]}; }}
.cv-sb-brand {{
  font-weight: 900; font-size: 1.1rem; color: #FFFFFF !important;
  margin: 6px 6px 18px 6px; letter-spacing: .02em;
}}
.cv-sb-item {{ margin: 6px 4px; }}
.cv-sb-item .stButton>button {{
  width: 100%; text-align: left; padding: 10px 14px; border-radius: 12px;
  border: none; background: transparent; font-weight: 600;
}}
.cv-sb-item.active .stButton>button {{
  background: {PALETTE["indigo"]}; color: #FFFFFF;
}}

 /* ---------- Header ---------- */
.cv-title {{ font-size: 1.6rem; font-weight: 800; color: {PALETTE["indigo_dark"]}; margin: 0; }}
.cv-subtitle {{ color: var(--cv-muted); font-size: .9rem; margin: 0 0 8px 0; }}

 /* ---------- Sections / Badges ---------- */
.cv-section {{
  display:flex; align-items:baseline; justify-content:space-between;
  margin: 4px 0 10px 0;
}}
.cv-section h3 {{ margin:0; font-size:1.05rem; font-weight:650; color: var(--cv-text); }}
.cv-section small {{ color: var(--cv-muted); font-weight: 400; }}
.cv-divider {{
  height:1px; margin: 14px 0;
  background: linear-gradient(90deg, transparent, var(--cv-divider), transparent);
}}
.cv-badge {{
  display:inline-flex; align-items:center; padding:4px 10px; border-radius:999px;
  font-size:.82rem; font-weight:600;
}}

 /* ---------- Cards ---------- */
.cv-card {{
  background: var(--cv-panel);
  border: 1px solid var(--cv-panel-border);
  border-radius: 16px;
  padding: 18px 20px;
  box-shadow: 0 1px 2px rgba(0,0,0,0.04);
}}
.cv-stat-value {{ font-size: 2.1rem; font-weight: 800; color: var(--cv-text); line-height: 1.1; }}
.cv-stat-label {{ color: var(--cv-muted); }}
.cv-row {{ display:flex; justify-content:space-between; align-items:center; margin: 8px 0; }}
.cv-dot {{ display:inline-block; width:8px; height:8px; border-radius:999px; margin-right:10px; }}
.cv-prevention {{
  background: {PALETTE["indigo"]}; color: #FFFFFF; border-radius: 16px; padding: 18px 20px;
}}
.cv-prevention p {{ color: {PALETTE["indigo_text"]}; }}
.cv-illustration img, .cv-illustration svg {{ width: 100%; max-height: 240px; }}
</style>
        """,
        unsafe_allow_html=True,
    )

# ---- Tiny helpers used across the UI ----------------------------------------
def spacer(px: int = 10):
    st.markdown(f"<div style='height:{px}px'></div>", unsafe_allow_html=True)

def render_divider():
    st.markdown('<div class="cv-divider"></div>', unsafe_allow_html=True)

def section_header(title: str, right: str = "", note: str = ""):
    note_html = f" <small>{note}</small>" if note else ""
    st.markdown(
        f"""
        <div class="cv-section">
          <h3>{title}{note_html}</h3>
          <div>{right}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
