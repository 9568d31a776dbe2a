"""
floorplan - Floor Layout Grid Model

Lets a landlord lay out a building floor as units on a fixed grid, persist the
layout as vector markup plus unit records, and derive occupancy overlays.

Modules:
    - core: Exceptions, logging and settings
    - domain: Pydantic records and the pure grid/selection/shape functions
    - application: Serializer, unit builder, overlay resolver, editor session, exporter
    - ui: Streamlit editor page and components
"""

__version__ = "1.2.0"
