"""
Helper functions for display formatting and table pagination.
"""
import html
import math

import pandas as pd
from utils.constants import DEFAULT_STATUS_COLOR, MAX_VISIBLE_PAGES, PROJECT_STATUS_COLORS


def format_currency(value):
    """Display currency with NULL handling."""
    if value is None or pd.isna(value):
        return '-'
    return f"${value:,.2f}"


def format_hourly_rate(rate):
    if rate is None or pd.isna(rate):
        return '-'
    return f"${rate:,.2f}/hr"


def format_hours(hours):
    if hours is None or pd.isna(hours):
        return '-'
    return f"{hours:,.1f}"


def get_initials(name):
    """'John Doe' -> 'JD'"""
    return ''.join(part[0] for part in str(name).split() if part).upper()


def get_status_color(status):
    """Badge colour for a ProjectStatus or raw status label"""
    label = getattr(status, 'value', status)
    for known_label, color in PROJECT_STATUS_COLORS.items():
        if str(label).strip().lower() == known_label.lower():
            return color
    return DEFAULT_STATUS_COLOR


def format_project_badge(project, separator=' '):
    """Bold project name followed by a coloured status badge, HTML-escaped for st.markdown"""
    color = get_status_color(project.status)
    return (
        f"**{html.escape(project.name)}**{separator}"
        f"<span class='status-badge' style='background-color: {color}; color: white;'>"
        f"{html.escape(project.status.value)}</span>"
    )


def get_total_pages(item_count, per_page):
    if item_count <= 0 or per_page <= 0:
        return 0
    return math.ceil(item_count / per_page)


def paginate(items, page, per_page):
    """
    Slice items for a 1-based page number.
    Pages outside the valid range are clamped to the first/last page.
    """
    total_pages = get_total_pages(len(items), per_page)
    if total_pages == 0:
        return []
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return list(items[start:start + per_page])


def get_page_numbers(current_page, total_pages, max_visible=MAX_VISIBLE_PAGES):
    """
    Page numbers to show in a pager.
    All pages when they fit, otherwise a window of two pages either side of current_page.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    start = max(1, current_page - 2)
    end = min(total_pages, current_page + 2)
    return list(range(start, end + 1))
