# packview_app/ui/lib/probe_panel.py
from __future__ import annotations
import html
from typing import Dict, Iterable

import pandas as pd
import streamlit as st

from packview_app.lib.probes import ProbeResult
from packview_app.lib.run_state import ProbeRunState

_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"

# (background, border, text) per status
_COLORS = {
    "success": ("#f0fdf4", "#22c55e", "#16a34a"),
    "error": ("#fef2f2", "#ef4444", "#dc2626"),
}


def get_run_state(key: str = "probe_run_state") -> ProbeRunState:
    """One ProbeRunState per browser session."""
    if key not in st.session_state:
        st.session_state[key] = ProbeRunState()
    return st.session_state[key]


def header_text(state: ProbeRunState, texts: Dict[str, str]) -> str:
    if state.loading:
        return texts["header_loading"]
    if state.results and state.all_success:
        return texts["header_all_ok"]
    if state.has_errors:
        return texts["header_failed"]
    return texts["header_done"]


def render_header(slot, state: ProbeRunState, texts: Dict[str, str]) -> None:
    slot.markdown(
        f"""
<div style="background:{_GRADIENT};color:white;padding:30px;border-radius:15px;margin-bottom:30px;">
  <h1 style="margin:0 0 10px 0;font-size:32px;color:white;">{html.escape(header_text(state, texts))}</h1>
  <p style="margin:0;opacity:0.9;">{html.escape(texts["subtitle"])}</p>
</div>
""",
        unsafe_allow_html=True,
    )


def render_result(result: ProbeResult, texts: Dict[str, str]) -> None:
    bg, border, fg = _COLORS[result.status.value]
    icon, label = ("✅", texts["label_success"]) if result.ok else ("❌", texts["label_error"])
    st.markdown(
        f"""
<div style="margin-bottom:15px;padding:15px;border-radius:8px;background:{bg};border:2px solid {border};">
  <div style="font-size:18px;font-weight:bold;color:{fg};margin-bottom:5px;">{icon} {html.escape(label)}</div>
  <div style="color:#374151;">{html.escape(result.message)}</div>
</div>
""",
        unsafe_allow_html=True,
    )


def render_celebration(texts: Dict[str, str]) -> None:
    st.markdown(
        f"""
<div style="margin-top:30px;padding:20px;background:#fef3c7;border-radius:15px;border:2px solid #f59e0b;">
  <div style="font-size:24px;margin-bottom:10px;">{html.escape(texts["congrats_title"])}</div>
  <div style="color:#92400e;">{html.escape(texts["congrats_body"])}</div>
</div>
""",
        unsafe_allow_html=True,
    )


def results_frame(results: Iterable[ProbeResult]) -> pd.DataFrame:
    rows = [
        {"probe": r.probe.value, "status": r.status.value, "message": r.message}
        for r in results
    ]
    return pd.DataFrame(rows, columns=["probe", "status", "message"])
