"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- schemas/: request bodies and the response envelope
- dependencies/: auth dependency for routes
"""
