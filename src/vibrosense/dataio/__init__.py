"""Data input/output helpers for exported recordings.

Utility modules here keep disk-level concerns isolated from the rest of the
application:
- :mod:`exporter` writes the recording log as CSV plus a JSON sidecar.
- :mod:`log_loader` reads exports back for offline review.
- :mod:`file_paths` centralises export file naming.
- :mod:`preview_plot` renders optional PNG previews.
"""
