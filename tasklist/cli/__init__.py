"""
FILE: tasklist/cli/__init__.py
PURPOSE: Process entry point (typer CLI)
"""
