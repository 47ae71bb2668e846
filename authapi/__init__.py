"""
Host-facing API for the JSON auth provider.

Exposes the manager's two operations (configure, authenticate) to a host
process over FastAPI, plus an HTTP Basic dependency for protecting routes.
"""
