"""Virtualized circular carousel with paginated bullets."""
