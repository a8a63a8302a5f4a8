"""Tests for the FastAPI server."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from lxml import etree

from server.main import app
from server.server_config import DOWNLOAD_ERROR_MESSAGE


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestKeywordsEndpoint:
    """Tests for POST /api/keywords."""

    def test_extracts_fenced_array(self, client: TestClient) -> None:
        """Keywords are extracted from a fenced JSON array."""
        response = client.post("/api/keywords", json={"text": '```json\n["alpha", "beta"]\n```'})

        assert response.status_code == 200
        assert response.json() == {"keywords": ["alpha", "beta"]}

    def test_malformed_output_is_not_an_error(self, client: TestClient) -> None:
        """Unreadable model output yields an empty list, not an error."""
        response = client.post("/api/keywords", json={"text": '["unterminated'})

        assert response.status_code == 200
        assert response.json() == {"keywords": []}

    def test_deeply_nested_brackets_are_not_an_error(self, client: TestClient) -> None:
        """Nesting too deep for the JSON decoder still returns 200."""
        text = "alpha\n" + "[" * 50_000 + "]" * 50_000

        response = client.post("/api/keywords", json={"text": text})

        assert response.status_code == 200
        assert response.json() == {"keywords": ["alpha"]}

    def test_deduplicate_option(self, client: TestClient) -> None:
        """Repeated keywords can be dropped on request."""
        response = client.post("/api/keywords", json={"text": "a, b, a", "deduplicate": True})

        assert response.json() == {"keywords": ["a", "b"]}

    def test_missing_text_is_rejected(self, client: TestClient) -> None:
        """A body without text fails validation."""
        assert client.post("/api/keywords", json={}).status_code == 422


class TestMindmapDownload:
    """Tests for POST /api/mindmap/download."""

    def test_returns_freemind_attachment(self, client: TestClient, sample_outline: str) -> None:
        """The document is returned as a .mm attachment."""
        response = client.post("/api/mindmap/download", json={"outline": sample_outline})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/x-freemind"
        assert response.headers["content-disposition"] == 'attachment; filename="mindmap.mm"'
        document = etree.fromstring(response.content)
        assert [node.get("TEXT") for node in document.iter("node")] == ["Mind Map", "A", "B", "C"]

    def test_escapes_labels(self, client: TestClient) -> None:
        """Labels with markup characters produce a well-formed document."""
        outline = '@startmindmap\n+R&D <"core">\n@endmindmap'
        response = client.post("/api/mindmap/download", json={"outline": outline})

        document = etree.fromstring(response.content)
        assert document.find("node/node").get("TEXT") == 'R&D <"core">'

    def test_requires_start_marker(self, client: TestClient) -> None:
        """Outlines that do not open with the start marker are rejected."""
        response = client.post("/api/mindmap/download", json={"outline": "+A\n++B"})

        assert response.status_code == 422

    def test_generation_failure_returns_generic_error(self, client: TestClient, sample_outline: str) -> None:
        """Unexpected failures surface one generic message and no document."""
        with patch("server.routers.mindmap.build_mindmap_file", side_effect=RuntimeError("boom")):
            response = client.post("/api/mindmap/download", json={"outline": sample_outline})

        assert response.status_code == 500
        assert response.json() == {"error": DOWNLOAD_ERROR_MESSAGE}
        assert "content-disposition" not in response.headers


class TestMindmapMarkdown:
    """Tests for POST /api/mindmap/markdown."""

    def test_renders_markdown(self, client: TestClient, sample_outline: str) -> None:
        """Outline headings come back as Markdown with a heading count."""
        response = client.post("/api/mindmap/markdown", json={"outline": sample_outline})

        assert response.status_code == 200
        assert response.json() == {"markdown": "# A\n## B\n# C", "nodes": 3}


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


class TestMindmapRequestValidation:
    """Tests for start-marker validation on the mind-map endpoints."""

    def test_leading_whitespace_rejected_for_download(self, client: TestClient) -> None:
        """The download outline must begin with the start marker itself."""
        response = client.post("/api/mindmap/download", json={"outline": "  @startmindmap\n+A\n@endmindmap"})

        assert response.status_code == 422

    def test_markdown_accepts_outline_without_marker(self, client: TestClient) -> None:
        """The Markdown preview does not require the start marker."""
        response = client.post("/api/mindmap/markdown", json={"outline": "+A\n+++C"})

        assert response.status_code == 200
        assert response.json() == {"markdown": "# A\n### C", "nodes": 2}


class TestServerEntryPoint:
    """Tests for python -m server."""

    def test_main_runs_uvicorn_with_configured_settings(self) -> None:
        """uvicorn is started with the host, port and reload settings."""
        from server import __main__ as entry_point
        from server.server_config import HOST, PORT, RELOAD

        with patch.object(entry_point.uvicorn, "run") as mock_run:
            entry_point.main()

        mock_run.assert_called_once_with(
            "server.main:app", host=HOST, port=PORT, reload=RELOAD, log_config=None
        )
