import streamlit as st
from datetime import date
from components.excel_export import export_report_to_excel
from utils.constants import (
    DEFAULT_DATA_DIR,
    EMPLOYEES_CSV,
    EXCEL_REPORT_FILE,
    PROJECTS_CSV,
    WORK_ASSIGNMENTS_CSV,
    XLSX_MIME,
)
from utils.exceptions import DashboardError
from utils.logger import get_logger
from utils.repository import DataRepository

logger = get_logger(__name__)

repo = st.session_state.repository
processor = st.session_state.data_processor

st.markdown("### 💾 Data Management")

summary = repo.get_summary()
col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Employees", summary['employees'])
with col2:
    st.metric("Projects", summary['projects'])
with col3:
    st.metric("Work Assignments", summary['work_assignments'])

tab1, tab2, tab3 = st.tabs(["Import Data", "Export Data", "Reset"])

with tab1:
    st.markdown("#### Import CSV Snapshot")
    st.info("Upload all three files. The current snapshot is replaced only if every file parses and all references resolve.")

    with st.expander("CSV formats", expanded=False):
        st.markdown(f"""
        **{EMPLOYEES_CSV}:** id, first_name, last_name, annual_salary, hourly_rate (optional full_name)

        **{PROJECTS_CSV}:** id, name, status, start_date (optional end_date, description)
        - status: Completed, In Progress or Planning (any case)
        - dates: YYYY-MM-DD, MM/DD/YYYY or DD-Mon-YY

        **{WORK_ASSIGNMENTS_CSV}:** project_id, employee_id, hours_worked, monetary_value
        """)

    employees_file = st.file_uploader("Employees CSV", type=['csv'], key="employees_upload")
    projects_file = st.file_uploader("Projects CSV", type=['csv'], key="projects_upload")
    work_file = st.file_uploader("Work Assignments CSV", type=['csv'], key="work_upload")

    if employees_file and projects_file and work_file:
        if st.button("Load Snapshot", type="primary"):
            try:
                new_repo = DataRepository.from_csv(employees_file, projects_file, work_file)
            except DashboardError as e:
                logger.error(f"CSV import rejected ({e.code}): {e}")
                st.error(f"Import failed: {e}")
            else:
                st.session_state.repository = new_repo
                logger.info(f"Snapshot replaced from upload: {new_repo.get_summary()}")
                st.success("Snapshot loaded")
                st.rerun()
    else:
        st.caption("Waiting for all three files")

with tab2:
    st.markdown("#### Export Snapshot")

    frames = repo.to_dataframes()
    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button("Download Employees", frames['employees'].to_csv(index=False),
                           file_name=EMPLOYEES_CSV, mime='text/csv')
    with col2:
        st.download_button("Download Projects", frames['projects'].to_csv(index=False),
                           file_name=PROJECTS_CSV, mime='text/csv')
    with col3:
        st.download_button("Download Work Assignments", frames['work_assignments'].to_csv(index=False),
                           file_name=WORK_ASSIGNMENTS_CSV, mime='text/csv')

    st.markdown("---")
    st.markdown("#### Excel Report")
    st.caption("Project summaries and the year projection from today, one sheet each.")
    summaries = processor.calculate_project_summaries(repo.get_projects(), repo.get_work_assignments())
    projection = processor.calculate_year_projection(
        date.today(), repo.get_employees(), repo.get_projects(), repo.get_work_assignments()
    )
    st.download_button(
        "Download Excel Report",
        export_report_to_excel(summaries, processor.calculate_overall_totals(summaries), projection),
        file_name=EXCEL_REPORT_FILE,
        mime=XLSX_MIME
    )

    st.markdown("---")
    export_dir = st.text_input("Export directory", value=DEFAULT_DATA_DIR)
    if st.button("Write CSV Files"):
        try:
            path = repo.export_to_csv(export_dir)
        except OSError as e:
            logger.error(f"Export to {export_dir} failed: {e}")
            st.error(f"Export failed: {e}")
        else:
            st.success(f"Wrote snapshot to {path}")

    st.markdown("---")
    st.markdown("#### Load From Directory")
    load_dir = st.text_input("Snapshot directory", value=DEFAULT_DATA_DIR, key="load_dir")
    if st.button("Load Directory"):
        try:
            new_repo = DataRepository.from_directory(load_dir)
        except (DashboardError, FileNotFoundError) as e:
            logger.error(f"Loading snapshot from {load_dir} failed: {e}")
            st.error(f"Load failed: {e}")
        else:
            st.session_state.repository = new_repo
            st.success(f"Loaded snapshot from {load_dir}")
            st.rerun()

with tab3:
    st.markdown("#### Reset to Sample Data")
    st.warning("Discards the current snapshot and reloads the bundled sample dataset.")
    if st.button("Reset"):
        st.session_state.repository = DataRepository.from_sample_data()
        logger.info("Snapshot reset to sample data")
        st.rerun()
