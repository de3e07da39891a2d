"""
FastAPI Overdue Backend package.

The overdue decision rule lives in src.api.dates and has no web dependencies;
the FastAPI app is in src.api.main.
"""
