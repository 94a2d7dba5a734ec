"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups. It configures the server only; the route table
is built from code.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, log_level="debug")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 0  # 0 = pick an unused TCP port at startup
    reload: bool = False

    # Logging
    log_level: str = "info"

    # Print "Listening at ..." once the port is known
    banner: bool = True
