import streamlit as st
from datetime import date
from components.charts import build_year_projection_chart
from utils.display_helpers import format_currency, format_project_badge
from utils.logger import get_logger

logger = get_logger(__name__)

repo = st.session_state.repository
processor = st.session_state.data_processor

st.markdown("### 🔮 Year Projection")

col1, col2 = st.columns([4, 1])
with col2:
    projection_date = st.date_input("Projection Date", value=date.today(), key="projection_date")
with col1:
    st.caption(
        "Linear run-rate projection: average monthly hours and value per employee "
        "across all recorded work, scaled by the headcount on active projects."
    )

projection = processor.calculate_year_projection(
    projection_date,
    repo.get_employees(),
    repo.get_projects(),
    repo.get_work_assignments()
)
logger.info(f"Rendered year projection for {projection_date}: {projection.remaining_months} months remaining")

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Projected Hours", f"{projection.total_projected_hours:,.0f}")
with col2:
    st.metric("Projected Value", format_currency(projection.total_projected_value))
with col3:
    st.metric("Active Projects", projection.active_projects)
with col4:
    st.metric("Active Employees", projection.active_employees)

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Avg Hours / Month", f"{projection.average_hours_per_month:,.1f}")
with col2:
    st.metric("Avg Value / Month", format_currency(projection.average_value_per_month))
with col3:
    st.metric("Remaining Months", projection.remaining_months)

st.markdown("---")

if projection.monthly_breakdown:
    st.plotly_chart(build_year_projection_chart(projection), use_container_width=True)

    breakdown_df = processor.projection_to_dataframe(projection)
    for column in ['projected_value', 'cumulative_value']:
        breakdown_df[column] = breakdown_df[column].apply(format_currency)
    for column in ['projected_hours', 'cumulative_hours']:
        breakdown_df[column] = breakdown_df[column].round(1)
    st.dataframe(
        breakdown_df.drop(columns=['month_index']).rename(columns={
            'month': 'Month',
            'projected_hours': 'Projected Hours',
            'projected_value': 'Projected Value',
            'cumulative_hours': 'Cumulative Hours',
            'cumulative_value': 'Cumulative Value'
        }),
        use_container_width=True,
        hide_index=True
    )
else:
    st.info("No months remain in the year for this projection date")

st.markdown("#### Active Projects")
active_projects = repo.get_active_projects()
if active_projects:
    for project in active_projects:
        st.markdown(f"- {format_project_badge(project)}", unsafe_allow_html=True)
else:
    st.info("No active projects")
