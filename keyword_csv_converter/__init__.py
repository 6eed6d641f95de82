"""Core logic for the Keyword to CSV Converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse and validate a JSON array of keyword records
- serialize validated records to CSV
- write the CSV for download
"""
