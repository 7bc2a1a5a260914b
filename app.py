# app.py
from __future__ import annotations
from pathlib import Path
import pandas as pd
import streamlit as st

from littlesearch.search import SearchEngine

DOCS_DIR   = "data"
DOCS_FILE  = "docs.txt"
NOISE_FILE = "noisewords.txt"

# ---------- helpers ----------
@st.cache_resource
def load_engine() -> SearchEngine:
    eng = SearchEngine(docs_dir=DOCS_DIR, docs_file=DOCS_FILE, noise_file=NOISE_FILE, progress=False)
    eng.make_index()
    return eng

def occurrences_frame(eng: SearchEngine, keyword: str) -> pd.DataFrame:
    occs = eng.index.lookup_occurrences(keyword)
    return pd.DataFrame(
        [{"document": o.document, "frequency": o.frequency} for o in occs],
        columns=["document", "frequency"],
    )

# ---------- UI setup ----------
st.set_page_config(page_title="Little Search Engine", layout="centered")
st.title("Little Search Engine")

# safety
if not Path(DOCS_DIR, DOCS_FILE).exists():
    st.error(f"Liste de documents introuvable : {Path(DOCS_DIR, DOCS_FILE)}"); st.stop()
if not Path(DOCS_DIR, NOISE_FILE).exists():
    st.error(f"Mots vides introuvables : {Path(DOCS_DIR, NOISE_FILE)}"); st.stop()

try:
    eng = load_engine()
except FileNotFoundError as e:
    st.error(str(e)); st.stop()

st.caption(f"{len(eng.index.documents)} documents, {len(eng.index)} mots-clés")

# ---------- header + search ----------
col1, col2 = st.columns(2)
kw1 = col1.text_input("Mot-clé 1", value="deep").strip()
kw2 = col2.text_input("Mot-clé 2", value="world").strip()
top_k = st.slider("Top-K", 1, 10, 5)

if kw1 and kw2:
    q1 = eng.normalize(kw1) or kw1.lower()
    q2 = eng.normalize(kw2) or kw2.lower()
    docs = eng.index.top_k_search(q1, q2, k=top_k)

    st.markdown("---")
    if not docs:
        st.caption("Aucun document.")
    for rank, doc_id in enumerate(docs, start=1):
        st.markdown(f"**{rank}.** {doc_id}")

    # ---------- occurrences ----------
    with st.expander("Occurrences"):
        c1, c2 = st.columns(2)
        with c1:
            st.caption(q1)
            st.dataframe(occurrences_frame(eng, q1), hide_index=True)
        with c2:
            st.caption(q2)
            st.dataframe(occurrences_frame(eng, q2), hide_index=True)
else:
    st.caption("Saisis deux mots-clés.")
