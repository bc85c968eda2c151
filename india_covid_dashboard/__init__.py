"""
Covid-19 in India state tracker.

`stats_client` fetches and validates the API payload, `view_model` shapes it
for rendering, and `ui` holds the Streamlit widgets. Run with
`streamlit run india_covid_dashboard/app.py`.
"""

__version__ = "1.0.0"
