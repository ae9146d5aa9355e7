from __future__ import annotations
import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

import importlib.util
import re
import streamlit as st

# repo root = .../packview
ROOT = pathlib.Path(__file__).resolve().parents[2]
PAGES = ROOT / "packview_app" / "ui" / "pages"

def _exec(pyfile: pathlib.Path) -> None:
    spec = importlib.util.spec_from_file_location(pyfile.stem, str(pyfile))
    assert spec and spec.loader
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)

def _pick_landing() -> pathlib.Path | None:
    if not PAGES.exists():
        return None
    files = sorted(PAGES.glob("*.py"))
    if not files:
        return None
    # 1) prefer the connection test
    for p in files:
        if re.search("test_connection", p.stem, re.IGNORECASE):
            return p
    # 2) else a numbered landing page
    for p in files:
        if p.name.startswith("000_"):
            return p
    return files[0]

target = _pick_landing()
if target and target.exists():
    _exec(target)
else:
    st.title("Packview")
    st.warning("No pages found at packview_app/ui/pages.")
