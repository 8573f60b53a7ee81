"""Business logic layer for media app.

This package contains all business logic for media operations:
- Move, rename, delete and reconcile media files
- URL and absolute path resolution
- Attaching media to other models

All business logic should be implemented here, separate from
models (data layer) and infrastructure (external systems).
"""
