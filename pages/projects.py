import streamlit as st
from utils.logger import get_logger
from pages.projects_breakdown import render_project_breakdown_tab
from pages.projects_summary import render_projects_summary_tab

logger = get_logger(__name__)

repo = st.session_state.repository
processor = st.session_state.data_processor

st.markdown("### 🚀 Projects")

# Lazy loading: only the selected tab renders
tab_names = ["Project Breakdown", "Projects Summary"]

if 'project_active_tab' not in st.session_state:
    st.session_state.project_active_tab = tab_names[0]

selected_tab = st.radio(
    "Select View",
    tab_names,
    index=tab_names.index(st.session_state.project_active_tab),
    horizontal=True,
    key="project_tab_selector",
    label_visibility="collapsed"
)

st.session_state.project_active_tab = selected_tab

st.markdown("---")

if selected_tab == "Project Breakdown":
    render_project_breakdown_tab(repo, processor)
elif selected_tab == "Projects Summary":
    render_projects_summary_tab(repo, processor)
