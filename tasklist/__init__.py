"""
FILE: tasklist/__init__.py
PURPOSE: Interactive command-line task list
"""

__version__ = "0.1.0"
