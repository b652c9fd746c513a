"""Unit tests for the allowlist HTTP endpoint."""

from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from resolver_check.services.allowlist_server import (
    SAMPLE_ALLOWLIST,
    AllowlistError,
    FileAllowlistProvider,
    StaticAllowlistProvider,
    create_app,
)
from resolver_check.utils.hashing import fast_hash


class FakeAllowlistProvider:
    """Provider returning predefined data or errors."""

    def __init__(self, data=b"", digest="", error=None):
        self.data = data
        self.digest = digest
        self.error = error
        self.calls = 0

    def snapshot(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.data, self.digest


def client_for(provider):
    return TestClient(create_app(provider))


class TestStaticAllowlistProvider:
    def test_snapshot_returns_sample_and_hash(self):
        data, digest = StaticAllowlistProvider().snapshot()

        assert data == SAMPLE_ALLOWLIST.encode("utf-8")
        assert digest == fast_hash(SAMPLE_ALLOWLIST)

    def test_custom_text(self):
        data, _ = StaticAllowlistProvider("only.example\n").snapshot()
        assert data == b"only.example\n"


class TestFileAllowlistProvider:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "allowlist.txt"
        path.write_text("github.com\n", encoding="utf-8")

        data, digest = FileAllowlistProvider(str(path)).snapshot()

        assert data == b"github.com\n"
        assert digest == fast_hash("github.com\n")

    def test_hash_follows_edits(self, tmp_path):
        path = tmp_path / "allowlist.txt"
        path.write_text("a.com\n", encoding="utf-8")
        provider = FileAllowlistProvider(str(path))
        _, before = provider.snapshot()

        path.write_text("a.com\nb.com\n", encoding="utf-8")

        data, after = provider.snapshot()
        assert after != before
        assert after == fast_hash(data.decode("utf-8"))

    def test_missing_file_raises(self, tmp_path):
        provider = FileAllowlistProvider(str(tmp_path / "missing.txt"))

        with pytest.raises(AllowlistError):
            provider.snapshot()

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "allowlist.txt"
        path.write_bytes(b"\xff\xfe")

        with pytest.raises(AllowlistError):
            FileAllowlistProvider(str(path)).snapshot()


class TestAllowlistEndpoint:
    """Test GET /allowlist.txt."""

    def test_serves_allowlist_with_cache_headers(self):
        provider = FakeAllowlistProvider(data=b"github.com\n", digest="abc123")

        response = client_for(provider).get("/allowlist.txt")

        assert response.status_code == 200
        assert response.content == b"github.com\n"
        assert response.headers["etag"] == '"abc123"'
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["content-type"] == "text/plain; charset=utf-8"

    def test_matching_etag_returns_not_modified(self):
        provider = FakeAllowlistProvider(data=b"github.com\n", digest="abc123")

        response = client_for(provider).get(
            "/allowlist.txt", headers={"If-None-Match": '"abc123"'}
        )

        assert response.status_code == 304
        assert response.content == b""

    def test_stale_etag_returns_full_body(self):
        provider = FakeAllowlistProvider(data=b"github.com\n", digest="new")

        response = client_for(provider).get(
            "/allowlist.txt", headers={"If-None-Match": '"old"'}
        )

        assert response.status_code == 200
        assert response.headers["etag"] == '"new"'

    def test_unquoted_etag_does_not_match(self):
        provider = FakeAllowlistProvider(data=b"x\n", digest="abc123")

        response = client_for(provider).get(
            "/allowlist.txt", headers={"If-None-Match": "abc123"}
        )

        assert response.status_code == 200

    def test_load_failure_returns_500(self):
        provider = FakeAllowlistProvider(error=AllowlistError("boom"))

        response = client_for(provider).get("/allowlist.txt")

        assert response.status_code == 500
        assert response.text == "failed to load allowlist"

    def test_provider_read_once_per_request(self):
        provider = FakeAllowlistProvider(data=b"x\n", digest="abc")

        client_for(provider).get("/allowlist.txt")

        assert provider.calls == 1

    def test_etag_is_hash_of_served_body(self, tmp_path):
        path = tmp_path / "allowlist.txt"
        path.write_text("old.com\n", encoding="utf-8")
        client = client_for(FileAllowlistProvider(str(path)))

        with patch.object(
            Path, "read_text", side_effect=["new.com\n", "newer.com\n"]
        ) as mock_read:
            response = client.get("/allowlist.txt")

        assert mock_read.call_count == 1
        assert response.text == "new.com\n"
        assert response.headers["etag"] == f'"{fast_hash(response.text)}"'

    def test_only_get_is_routed(self):
        provider = FakeAllowlistProvider(data=b"x\n", digest="abc")

        assert client_for(provider).post("/allowlist.txt").status_code == 405
        assert client_for(provider).get("/other.txt").status_code == 404

    def test_static_provider_end_to_end(self):
        client = client_for(StaticAllowlistProvider())

        first = client.get("/allowlist.txt")
        second = client.get(
            "/allowlist.txt", headers={"If-None-Match": first.headers["etag"]}
        )

        assert first.status_code == 200
        assert "github.com" in first.text
        assert second.status_code == 304
