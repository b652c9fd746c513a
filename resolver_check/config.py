"""Configuration module for resolver-check.

Loads and validates environment variables for the resolver checker and the
allowlist endpoint.
"""

import os
from dataclasses import dataclass
from typing import Optional


OUTPUT_FORMATS = ("json", "yaml")


def _env_flag(key: str, default: str = "false") -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class QueryConfig:
    """Timeout, retry and output settings for a checker run.

    Passed explicitly to the query engine so tests can use fast values
    without touching shared state.
    """

    # DNS Configuration
    request_timeout: float = 3.0
    max_retries: int = 3
    retry_delay: float = 3.0

    # Output Configuration
    output_format: str = "json"
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "QueryConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a variable is out of range or not a number.

        Returns:
            QueryConfig: Validated configuration instance.
        """
        request_timeout = float(os.getenv("DNS_TIMEOUT", "3"))
        if not 0 < request_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be > 0 and <= 60 seconds")

        max_retries = int(os.getenv("DNS_MAX_RETRIES", "3"))
        if not 0 <= max_retries <= 10:
            raise ValueError("DNS_MAX_RETRIES must be between 0 and 10")

        retry_delay = float(os.getenv("DNS_RETRY_DELAY", "3"))
        if not 0 <= retry_delay <= 60:
            raise ValueError("DNS_RETRY_DELAY must be between 0 and 60 seconds")

        output_format = os.getenv("OUTPUT_FORMAT", "json").strip().lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"OUTPUT_FORMAT must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

        return cls(
            request_timeout=request_timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            output_format=output_format,
            verbose=_env_flag("VERBOSE"),
        )

    @property
    def worst_case_seconds(self) -> float:
        """Upper bound on time spent querying one domain.

        Returns:
            float: Seconds across all attempts and retry delays.
        """
        return (self.max_retries + 1) * self.request_timeout + (
            self.max_retries * self.retry_delay
        )


@dataclass(frozen=True)
class ServerConfig:
    """Settings for the allowlist HTTP endpoint."""

    host: str = "0.0.0.0"
    port: int = 5963
    timeout_keep_alive: int = 120
    shutdown_timeout: int = 10
    allowlist_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a variable is out of range or not a number.

        Returns:
            ServerConfig: Validated configuration instance.
        """
        host = os.getenv("ALLOWLIST_HOST", "0.0.0.0").strip()
        if not host:
            raise ValueError("ALLOWLIST_HOST must not be empty")

        port = int(os.getenv("ALLOWLIST_PORT", "5963"))
        if not 1 <= port <= 65535:
            raise ValueError("ALLOWLIST_PORT must be between 1 and 65535")

        timeout_keep_alive = int(os.getenv("ALLOWLIST_KEEPALIVE_TIMEOUT", "120"))
        if timeout_keep_alive < 1:
            raise ValueError("ALLOWLIST_KEEPALIVE_TIMEOUT must be >= 1 second")

        shutdown_timeout = int(os.getenv("ALLOWLIST_SHUTDOWN_TIMEOUT", "10"))
        if shutdown_timeout < 1:
            raise ValueError("ALLOWLIST_SHUTDOWN_TIMEOUT must be >= 1 second")

        return cls(
            host=host,
            port=port,
            timeout_keep_alive=timeout_keep_alive,
            shutdown_timeout=shutdown_timeout,
            allowlist_file=os.getenv("ALLOWLIST_FILE") or None,
        )

    def addr(self) -> str:
        """Return the listen address in ``host:port`` form."""
        return f"{self.host}:{self.port}"
