"""
service_clients.api.routers

Route modules mounted by `service_clients.api.app`.
"""

# Package marker.
