"""
FILE: tasklist/core/__init__.py
PURPOSE: Domain layer (models, identifiers, repository, errors)
"""
