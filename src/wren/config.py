"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have defaults that reproduce the reference demo. Override
    what you need::

        config = AppConfig(error_status=400, fallback_status=404)
    """

    debug: bool = False

    # Logging
    log_level: str = "info"
    access_log: bool = True

    # Terminal responses. The demo never varies its status codes, so
    # both default to 200.
    error_status: int = 200
    fallback_status: int = 200
    fallback_message: str = "The route {path} does not exist!"

    # Matching: when False, one trailing slash is ignored ("/hello/" == "/hello")
    strict_slashes: bool = False
