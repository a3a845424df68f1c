"""Entry points: CLIs and the Streamlit dashboard."""
