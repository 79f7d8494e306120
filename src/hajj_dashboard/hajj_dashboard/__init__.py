"""Hajj Dashboard package.

This package is organized by feature modules (seeds, overlay, reconciliation,
records, ...) with a thin Flask controller layer on top of service/repository
layers. Reference entities are bundled as seed data and overlaid with local
edits persisted in a key-value store.
"""
