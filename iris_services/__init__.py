"""
Top-level package for Iris Services.

Serverless CRUD functions for appointments and patients backed by
DynamoDB.  All functionality lives in submodules under ``app``; the
Lambda entry points are in ``iris_services.app.functions``.
"""

__all__ = []
