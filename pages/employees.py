import streamlit as st
from utils.logger import get_logger
from pages.employees_grid import render_employee_grid_tab
from pages.employees_detail import render_employee_detail_tab

logger = get_logger(__name__)

repo = st.session_state.repository
processor = st.session_state.data_processor

st.markdown("### 👥 Employees")

# Lazy loading: only the selected tab renders
tab_names = ["Employee Grid", "Employee Detail"]

if 'employee_active_tab' not in st.session_state:
    st.session_state.employee_active_tab = tab_names[0]

selected_tab = st.radio(
    "Select View",
    tab_names,
    index=tab_names.index(st.session_state.employee_active_tab),
    horizontal=True,
    key="employee_tab_selector",
    label_visibility="collapsed"
)

st.session_state.employee_active_tab = selected_tab

st.markdown("---")

if selected_tab == "Employee Grid":
    render_employee_grid_tab(repo, processor)
elif selected_tab == "Employee Detail":
    render_employee_detail_tab(repo, processor)
