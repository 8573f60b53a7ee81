"""Infrastructure layer for media app.

This package contains integrations with external systems:
- Storage backends (local filesystem, S3/MinIO/R2) with move support
- URL generators per disk
- Pure path and size formatting helpers

Keep infrastructure concerns separate from business logic.
"""
