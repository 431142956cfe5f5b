"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    reload: bool = False  # debug=True turns this on as well

    # Logging
    log_level: str = "info"

    # Responses
    default_content_type: str = "text/plain; charset=utf-8"

    @property
    def effective_log_level(self) -> str:
        """The level ``App.run()`` configures logging with."""
        return "debug" if self.debug else self.log_level

    @property
    def effective_reload(self) -> bool:
        """Whether the server restarts on code changes."""
        return self.debug or self.reload
