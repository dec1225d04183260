"""
Application package initializer.

``core`` holds configuration, logging and the DynamoDB connection,
``schemas`` the wire and storage models, ``repositories`` the table
access, ``services`` the business rules and ``functions`` the Lambda
entry points.  ``api`` and ``main`` provide a FastAPI server that
fronts the functions for local development.
"""
