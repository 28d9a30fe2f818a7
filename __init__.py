"""Personal Expenses Dashboard package.

A single-page Streamlit dashboard for recording personal expenses and
charting them by category and by day.  See ``app.py`` for the entry point
and ``aggregates.py`` for the numbers behind the charts.
"""
