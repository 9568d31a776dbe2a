"""Main Application Entry Point.

Orchestrates the floor editor page and the sidebar via app_controller.
"""

import os
import sys

import streamlit as st

# Add the project root to path if not present (for running from root)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from floorplan.core.logging import configure_logging, get_logger
from floorplan.ui import app_controller
from floorplan.ui.pages.editor import render_editor_page
from floorplan.ui.state import SessionManager, set_state

# Buildings above this are edited floor by floor from exported files
MAX_FLOORS = 50


def render_sidebar() -> None:
    """Render sidebar: property size, imports and export."""
    with st.sidebar:
        st.title("⚙️ Property")

        property_name = st.text_input("Property name", value="")
        total = st.number_input(
            "Number of floors",
            min_value=1, max_value=MAX_FLOORS,
            value=SessionManager.get_total_floors(), step=1,
        )
        if total != SessionManager.get_total_floors():
            SessionManager.set_total_floors(int(total))
            st.rerun()

        with st.expander("📂 Load stored floors", expanded=False):
            floors_file = st.file_uploader("Floors (JSON)", type=["json"], key="floors_upload")
            if floors_file is not None and st.button("Load floors"):
                count = app_controller.load_floors(floors_file.getvalue())
                if count:
                    st.success(f"Loaded {count} floor(s)")

        with st.expander("👥 Occupancy", expanded=False):
            facts_file = st.file_uploader("Occupancy facts (JSON)", type=["json"], key="facts_upload")
            if facts_file is not None and st.button("Apply occupancy"):
                count = app_controller.load_occupancy_facts(facts_file.getvalue())
                if count:
                    st.success(f"Applied {count} occupancy record(s)")

        st.divider()
        if st.button("📤 Export saved floors", use_container_width=True):
            path = app_controller.export_saved_floors(property_name)
            if path:
                set_state("last_export_path", path)
                st.success(f"Exported to {path}")


def main() -> None:
    """Main application entry point."""
    # Streamlit configuration (must be first Streamlit call)
    st.set_page_config(
        page_title="Floor Layout Editor",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded",
    )
    configure_logging()
    log = get_logger(__name__)

    SessionManager.initialize()
    log.info("app_started")

    render_sidebar()
    render_editor_page()


if __name__ == "__main__":
    main()
