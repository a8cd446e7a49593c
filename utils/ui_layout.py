"""Reusable layout helpers for Streamlit pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

PageRenderer = Callable[[], None]


@dataclass(frozen=True)
class _NavigationLink:
    label: str
    target: str
    help_text: Optional[str] = None


_NAV_LINKS = (
    _NavigationLink("Model comparison", "app.py", "Compare two decay models over one cycle."),
    _NavigationLink("Home (Guide)", "pages/00_Home.py"),
    _NavigationLink("Comparison", "pages/01_Comparison.py", "Same comparison view as a standalone page."),
)


def _render_navigation_block(container: DeltaGenerator) -> None:
    """Render standardized navigation links for the workspace."""

    container.markdown("#### Navigate")
    for link in _NAV_LINKS:
        container.page_link(link.target, label=link.label, help=link.help_text)


def init_page_layout(
    *,
    page_title: str,
    main_title: str,
    description: Optional[str] = None,
) -> PageRenderer:
    """Initialize the page layout with a shared header and navigation block.

    The helper sets ``st.set_page_config`` immediately, reserves a header slot at
    the top of the page, and returns a renderer that fills it in.
    """

    st.set_page_config(page_title=page_title, layout="wide")
    header_container = st.container()

    def _render() -> None:
        with header_container:
            st.title(main_title)
            if description:
                st.caption(description)
            _render_navigation_block(st.container())
        st.divider()

    return _render
