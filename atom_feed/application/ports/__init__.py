"""Application ports.

Protocols implemented by the infrastructure layer.
"""

from .services import LoggerPort, XmlSerializerPort

__all__ = [
    "LoggerPort",
    "XmlSerializerPort",
]
