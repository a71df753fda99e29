"""
service_clients.services

Service layer used by the API routers.

Responsibilities:
- Local group registry.
- Access-rights bookkeeping built on the service client converter.
"""

# Package marker.
