"""
Extensions Module - Shared application-wide objects
Kept out of app.py so blueprints can import them without circular imports.
"""

from utils.catalog import ProjectCatalog

# Static catalog, validated once at import
project_catalog = ProjectCatalog()

__all__ = ['project_catalog']
