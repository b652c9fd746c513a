"""Entry point for the allowlist HTTP endpoint."""

import logging
import sys

import uvicorn

from resolver_check.config import ServerConfig
from resolver_check.services.allowlist_server import (
    ALLOWLIST_PATH,
    AllowlistError,
    AllowlistProvider,
    FileAllowlistProvider,
    StaticAllowlistProvider,
    create_app,
)
from resolver_check.services.logger import setup_logging
from resolver_check.utils.hashing import secure_hash


logger = logging.getLogger(__name__)

FINGERPRINT_BYTES = 16


def build_provider(config: ServerConfig) -> AllowlistProvider:
    """Pick the allowlist source for this configuration.

    Args:
        config: Server configuration.

    Returns:
        AllowlistProvider: File-backed provider when ALLOWLIST_FILE is set,
        otherwise the built-in sample list.
    """
    if config.allowlist_file:
        return FileAllowlistProvider(config.allowlist_file)
    return StaticAllowlistProvider()


def log_allowlist_fingerprint(provider: AllowlistProvider) -> None:
    """Log the size and SHAKE256 fingerprint of the allowlist being served.

    Operators compare the fingerprint against the list they deployed. An
    unreadable file is only a warning here, since it may appear later and
    is re-read on every request.
    """
    try:
        data, _ = provider.snapshot()
    except AllowlistError as e:
        logger.warning(f"Allowlist not readable at startup: {e}")
        return

    logger.info(
        "Allowlist loaded",
        extra={
            "size": len(data),
            "fingerprint": secure_hash(data.decode("utf-8"), FINGERPRINT_BYTES),
        },
    )


def main() -> int:
    """Run the allowlist endpoint until SIGINT/SIGTERM.

    Returns:
        int: Exit code (0 after graceful shutdown, 1 on fatal error).
    """
    try:
        config = ServerConfig.from_env()
    except ValueError as e:
        setup_logging(verbose=True)
        logger.error(f"Fatal error: {e}")
        return 1

    setup_logging(verbose=True)
    provider = build_provider(config)
    log_allowlist_fingerprint(provider)
    app = create_app(provider)

    logger.info(
        "Starting allowlist server",
        extra={"url": f"http://{config.addr()}{ALLOWLIST_PATH}"},
    )

    try:
        # uvicorn installs SIGINT/SIGTERM handlers and drains connections
        # for up to shutdown_timeout seconds
        uvicorn.run(
            app,
            host=config.host,
            port=config.port,
            timeout_keep_alive=config.timeout_keep_alive,
            timeout_graceful_shutdown=config.shutdown_timeout,
            log_config=None,
        )
    except (OSError, SystemExit) as e:
        logger.error(f"Fatal error: server failed: {e}", exc_info=True)
        return 1

    logger.info("Server stopped gracefully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
