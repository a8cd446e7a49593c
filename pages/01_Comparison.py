"""Comparison page that reuses the main UI defined in ``app.py``.

Streamlit runs each page as a standalone script, so this page imports the
shared ``run_app`` entry point instead of duplicating the layout.
"""

from app import run_app

run_app()
