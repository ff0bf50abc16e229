import json
import os
import sys

import pandas as pd
import streamlit as st

# Ensure project root is in path
current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from ytchapters.html_cleaner import html_to_text
from ytchapters.output_manager import build_output_data
from ytchapters.parser import detect_format, parse_chapters
from ytchapters.search import rank_chapters
from ytchapters.utils import setup_logging

setup_logging()

# Page Config
st.set_page_config(
    page_title="Video Chapter Extractor",
    page_icon="🎬",
    layout="wide"
)

# Initialize Session State
if 'chapters' not in st.session_state:
    st.session_state.chapters = []
if 'format_name' not in st.session_state:
    st.session_state.format_name = None

# Sidebar
st.sidebar.title("Configuration")
is_html = st.sidebar.checkbox("Description is HTML", value=False)
min_score = st.sidebar.slider("Search Confidence Score", 0, 100, 70)

st.title("Video Chapter Extractor 🎬")
st.markdown("Extract chapter timestamps from a video description.")

# --- Step 1: Input ---
st.header("1. Paste Description")
description = st.text_area("Video description", height=250)

if st.button("Parse Chapters"):
    text = html_to_text(description) if is_html else description
    st.session_state.chapters = parse_chapters(text)
    st.session_state.format_name = detect_format(text)

    if st.session_state.chapters:
        st.success(
            f"Found {len(st.session_state.chapters)} chapters "
            f"('{st.session_state.format_name}' format)."
        )
    else:
        st.warning("No chapters found in this description.")

# --- Step 2: Review ---
if st.session_state.chapters:
    st.header("2. Review Chapters")

    data = []
    for i, c in enumerate(st.session_state.chapters, start=1):
        data.append({
            "ID": i,
            "Start": c.start_time,
            "Seconds": c.start,
            "Title": c.title,
            "Ignore": False
        })

    df = pd.DataFrame(data)

    edited_df = st.data_editor(
        df,
        column_config={
            "Ignore": st.column_config.CheckboxColumn(
                "Ignore",
                help="Check to exclude this chapter from the download",
                default=False,
            )
        },
        disabled=["ID", "Start", "Seconds", "Title"],
        hide_index=True,
        width='stretch'
    )

    ignore_ids = edited_df[edited_df["Ignore"]]["ID"].tolist()
    kept = [c for i, c in enumerate(st.session_state.chapters, start=1) if i not in ignore_ids]

    st.info(f"Selected {len(kept)} chapters.")

    # --- Step 3: Search ---
    st.header("3. Find a Chapter")
    query = st.text_input("Chapter title")
    if query:
        ranked = [(score, c) for score, c in rank_chapters(kept, query) if score >= min_score]
        if ranked:
            st.dataframe(pd.DataFrame([
                {"Score": round(score, 1), "Start": c.start_time, "Title": c.title}
                for score, c in ranked
            ]), hide_index=True)
        else:
            st.caption("No matching chapter.")

    # --- Step 4: Download ---
    st.header("4. Download Results")
    output_data = build_output_data(kept)

    st.download_button(
        label="Download chapter_timestamps.json",
        data=json.dumps(output_data, indent=4),
        file_name="chapter_timestamps.json",
        mime="application/json"
    )

    st.json(output_data)
