"""
Endpoint subpackage for API v1.

One module per entity; the routers are aggregated in ``router.py``.
"""
