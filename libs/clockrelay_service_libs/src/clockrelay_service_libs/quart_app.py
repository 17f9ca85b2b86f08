"""
Type-safe Quart application class for ClockRelay services.

Provides typed attributes for app-level infrastructure instead of
setattr()/getattr() on a plain Quart instance.
"""

from __future__ import annotations

from typing import Any

from dishka import AsyncContainer
from quart import Quart


class ClockRelayQuartApp(Quart):
    """Quart application with a guaranteed dependency injection container.

    GUARANTEED INFRASTRUCTURE:
        container: Dishka async container for dependency injection
        extensions: Standard Quart extensions dictionary (metrics, etc.)

    The create_app factory of each Quart service MUST assign ``container``
    immediately after construction.

    Example:
        >>> def create_app() -> ClockRelayQuartApp:
        ...     app = ClockRelayQuartApp(__name__)
        ...     app.container = make_async_container(...)
        ...     return app
    """

    container: AsyncContainer
    """Dishka async container; closed by the service's after_serving hook."""

    extensions: dict[str, Any]

    def __init__(self, import_name: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(import_name, *args, **kwargs)
        self.extensions = {}
