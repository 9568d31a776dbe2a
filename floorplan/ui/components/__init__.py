"""Streamlit UI components."""
