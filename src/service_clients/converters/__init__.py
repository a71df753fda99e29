"""
service_clients.converters

Conversion boundary between API models and internal identifiers.

Responsibilities:
- Per-kind identifier codecs (client, global group).
- The service client converter composing them.
"""

# Package marker.
