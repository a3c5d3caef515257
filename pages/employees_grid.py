"""
Employee Grid tab - paginated employee table with salary and rate averages.
"""
import streamlit as st
import pandas as pd
from utils.constants import EMPLOYEE_GRID_COLUMNS, EMPLOYEES_PER_PAGE
from utils.display_helpers import (
    format_currency,
    format_hourly_rate,
    get_initials,
    get_page_numbers,
    get_total_pages,
    paginate,
)


def render_employee_grid_tab(repo, processor):
    """Render the Employee Grid tab."""
    employees = repo.get_employees()

    if not employees:
        st.info("No employees found")
        return

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Employees", len(employees))
    with col2:
        st.metric("Average Annual Salary", format_currency(processor.calculate_average_annual_salary(employees)))
    with col3:
        st.metric("Average Hourly Rate", format_hourly_rate(processor.calculate_average_hourly_rate(employees)))

    total_pages = get_total_pages(len(employees), EMPLOYEES_PER_PAGE)
    if 'employee_grid_page' not in st.session_state:
        st.session_state.employee_grid_page = 1
    current_page = min(st.session_state.employee_grid_page, total_pages)

    page_employees = paginate(employees, current_page, EMPLOYEES_PER_PAGE)
    display_df = pd.DataFrame(
        [
            {
                EMPLOYEE_GRID_COLUMNS[0]: f"{get_initials(e.full_name)} · {e.full_name}",
                EMPLOYEE_GRID_COLUMNS[1]: format_currency(e.annual_salary),
                EMPLOYEE_GRID_COLUMNS[2]: format_hourly_rate(e.hourly_rate)
            }
            for e in page_employees
        ],
        columns=EMPLOYEE_GRID_COLUMNS
    )
    st.dataframe(display_df, use_container_width=True, hide_index=True)

    # Pager
    page_numbers = get_page_numbers(current_page, total_pages)
    cols = st.columns(len(page_numbers) + 2)
    with cols[0]:
        if st.button("◀", key="employee_grid_prev", disabled=current_page <= 1):
            st.session_state.employee_grid_page = current_page - 1
            st.rerun()
    for col, page in zip(cols[1:-1], page_numbers):
        with col:
            if st.button(str(page), key=f"employee_grid_page_{page}", type="primary" if page == current_page else "secondary"):
                st.session_state.employee_grid_page = page
                st.rerun()
    with cols[-1]:
        if st.button("▶", key="employee_grid_next", disabled=current_page >= total_pages):
            st.session_state.employee_grid_page = current_page + 1
            st.rerun()

    first_shown = (current_page - 1) * EMPLOYEES_PER_PAGE + 1
    st.caption(f"Showing {first_shown}-{first_shown + len(page_employees) - 1} of {len(employees)} employees")
