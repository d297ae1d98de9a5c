"""
Display client for the three-tier scaffold.

Serves a single page that fetches ``/api/data`` from the backend and shows
the JSON it returns.
"""
