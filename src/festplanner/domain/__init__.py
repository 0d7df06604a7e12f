"""
Domain layer - persisted entities.

The planning core itself works on plain dataclasses (see
``festplanner.runtime.catalog_types``); this package only holds the
SQLAlchemy entities behind durable storage.
"""
