"""
Lambda entry points, one module per entity.

Each module exposes plain ``handler(event, context)`` functions for
``create``, ``get``, ``get_all``, ``update`` and ``delete``.
"""
