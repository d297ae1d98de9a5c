"""
Backend package for the three-tier scaffold.

This package provides a FastAPI application that checks database liveness
and lists object-storage buckets, combining both into a single JSON
envelope served at ``/api/data``.
"""
