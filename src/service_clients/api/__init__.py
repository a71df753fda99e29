"""
service_clients.api

HTTP API layer (FastAPI).

Responsibilities:
- App factory and router registration.
- Dependency wiring and error rendering.
"""

# Package marker.
