"""
ClockRelay Service Libraries Package.

Shared infrastructure for the Gateway and Provider services: structured
logging, configuration base classes, error handling and server supervision.
"""

from .quart_app import ClockRelayQuartApp
from .supervisor import ServerOutcome, ServerSpec, ServerSupervisor

__all__ = [
    "ClockRelayQuartApp",
    "ServerOutcome",
    "ServerSpec",
    "ServerSupervisor",
]
