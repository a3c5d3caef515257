import logging
from datetime import datetime

# Setup logging FIRST, before any Streamlit imports
from utils.logger import setup_logging, get_logger
setup_logging(log_level=logging.INFO)
logger = get_logger(__name__)

# Now import Streamlit and other dependencies
import streamlit as st

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title="Timesheet Dashboard",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
    <style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        text-align: center;
        margin-bottom: 2rem;
    }
    .status-badge {
        padding: 0.15rem 0.6rem;
        border-radius: 0.75rem;
        font-size: 0.8rem;
        font-weight: 600;
    }
    </style>
""", unsafe_allow_html=True)

from utils.data_processor import DataProcessor
from utils.exceptions import DashboardError
from utils.repository import DataRepository

# Initialize session state BEFORE defining pages
# Page modules read the snapshot from session state at import time
if 'repository' not in st.session_state:
    logger.info("Loading sample snapshot and data processor")
    try:
        st.session_state.repository = DataRepository.from_sample_data()
    except DashboardError as e:
        logger.error(f"Sample data failed validation: {e}")
        st.error(f"Could not load sample data: {e}")
        st.stop()
    st.session_state.data_processor = DataProcessor()

# Define pages using st.Page
overview_page = st.Page(
    "pages/overview.py",
    title="Overview Dashboard",
    icon="📊",
    default=True
)
employees_page = st.Page(
    "pages/employees.py",
    title="Employees",
    icon="👥"
)
projects_page = st.Page(
    "pages/projects.py",
    title="Projects",
    icon="🚀"
)
projection_page = st.Page(
    "pages/year_projection.py",
    title="Year Projection",
    icon="🔮"
)
data_page = st.Page(
    "pages/data_management.py",
    title="Data Management",
    icon="💾"
)

# Create navigation
pg = st.navigation([
    overview_page,
    employees_page,
    projects_page,
    projection_page,
    data_page
])

# Quick stats in sidebar
with st.sidebar:
    st.markdown("### 📈 Quick Stats")

    repo = st.session_state.repository
    processor = st.session_state.data_processor

    summary = repo.get_summary()
    st.metric("Employees", summary['employees'])
    st.metric("Active Projects", f"{summary['active_projects']} / {summary['projects']}")

    totals = processor.calculate_overall_totals(
        processor.calculate_project_summaries(repo.get_projects(), repo.get_work_assignments())
    )
    st.metric("Total Hours Logged", f"{totals.total_hours:,.0f}")
    st.metric("Total Monetary Value", f"${totals.total_value:,.0f}")

# Run the selected page
pg.run()

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #666;'>
        Timesheet Dashboard v1.0 | Financial Analytics &amp; Project Management | {0}
    </div>
    """.format(datetime.now().strftime("%Y-%m-%d")),
    unsafe_allow_html=True
)
