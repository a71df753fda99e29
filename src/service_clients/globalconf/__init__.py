"""
service_clients.globalconf

Read-only query interface over the federation's global configuration.

Responsibilities:
- Member display names and global group descriptions for formatting.
"""

# Package marker.
