"""
Service layer.

Each service encapsulates the business rules for one entity (lookup
priority, field mapping, identifiers and timestamps) on top of a
repository.  Services are plain objects; the functions build one per
warm container and reuse it.
"""
