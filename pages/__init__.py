# Pages package initialization
# Page scripts are registered by file path in app.py (st.Page); the
# render_* tab modules are imported by their parent pages.
