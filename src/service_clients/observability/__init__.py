"""
service_clients.observability

Logging and request-context instrumentation.

Responsibilities:
- structlog configuration.
- Request-id propagation middleware.
"""

# Package marker.
