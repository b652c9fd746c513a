"""Allowlist HTTP endpoint with ETag-based conditional caching."""

import logging
from pathlib import Path
from typing import Protocol, Tuple

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from resolver_check.utils.hashing import fast_hash


logger = logging.getLogger(__name__)

ALLOWLIST_PATH = "/allowlist.txt"
MEDIA_TYPE = "text/plain"  # charset=utf-8 is appended by Starlette

# Sample allowlist served until a file is configured
SAMPLE_ALLOWLIST = """
# Sample Allowlist
github.com
example.com
yahoo.com
"""


class AllowlistError(Exception):
    """Raised when allowlist data cannot be loaded."""


class AllowlistProvider(Protocol):
    """Source of allowlist data."""

    def snapshot(self) -> Tuple[bytes, str]:
        """Return the allowlist body and the hash of that same body."""
        ...


class StaticAllowlistProvider:
    """Serves a fixed in-memory allowlist."""

    def __init__(self, text: str = SAMPLE_ALLOWLIST):
        self._text = text

    def snapshot(self) -> Tuple[bytes, str]:
        """Return the allowlist and its cache-validation hash.

        Returns:
            Tuple[bytes, str]: (UTF-8 body, XXH3 hex digest). The digest is
            not for security purposes.
        """
        return self._text.encode("utf-8"), fast_hash(self._text)


class FileAllowlistProvider:
    """Serves an allowlist file, re-read on every request.

    Edits to the file are picked up without a restart, and the ETag
    changes with them. Each snapshot reads the file once, so the ETag
    always matches the body it is sent with.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def snapshot(self) -> Tuple[bytes, str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AllowlistError(f"cannot read {self.path}: {e}") from e
        return text.encode("utf-8"), fast_hash(text)


def create_app(provider: AllowlistProvider) -> FastAPI:
    """Build the allowlist application.

    Args:
        provider: Source of allowlist data and its hash.

    Returns:
        FastAPI: App exposing ``GET /allowlist.txt``.
    """
    app = FastAPI(title="allowlist-server", docs_url=None, redoc_url=None)

    @app.get(ALLOWLIST_PATH)
    def get_allowlist(request: Request) -> Response:
        try:
            data, raw_etag = provider.snapshot()
        except AllowlistError as e:
            logger.error(f"Failed to load allowlist: {e}")
            return PlainTextResponse("failed to load allowlist", status_code=500)

        etag = f'"{raw_etag}"'

        if request.headers.get("if-none-match") == etag:
            return Response(status_code=304)

        logger.info(
            "Served allowlist",
            extra={
                "size": len(data),
                "remote_addr": request.client.host if request.client else None,
            },
        )
        return Response(
            content=data,
            status_code=200,
            media_type=MEDIA_TYPE,
            headers={"ETag": etag, "Cache-Control": "no-cache"},
        )

    return app
