"""
Pydantic schema definitions.

Each entity defines a wire model (request/response bodies), a storage
model (the DynamoDB item) and a lookup model carrying the optional
query parameters of its ``get`` operation.
"""
