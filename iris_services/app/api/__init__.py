"""
Local HTTP surface.

API Gateway fronts the functions in production.  This package mounts
the same functions behind FastAPI routes so the whole API can be run
and exercised locally without deploying.
"""
