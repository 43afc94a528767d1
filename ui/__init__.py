"""
Web UI module.

Provides the interfaces for the pipeline network:
- Streamlit dashboard: Network summary, analytics, and route finder
- Flask app: Map page and JSON API
"""
