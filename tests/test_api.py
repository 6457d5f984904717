"""Tests for EAN-13 FastAPI endpoints."""

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from ean13.errors import FontNotFound
from ean13.main import app, resolve_font_path


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("EAN13_FONT_PATH", raising=False)
    with TestClient(app) as test_client:
        yield test_client


class TestHealthEndpoint:
    def test_health_returns_200(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["service"] == "ean13"

    def test_health_includes_version(self, client):
        resp = client.get("/health")
        data = resp.json()
        assert "version" in data


class TestEncodeEndpoint:
    def test_encode_png_returns_image(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "scale": 6})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content[:4] == b"\x89PNG"

    def test_encode_png_size(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "scale": 6})
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (648, 360)

    def test_encode_explicit_dimensions(self, client):
        resp = client.post(
            "/encode",
            json={"number": "123456789012", "width": 620, "height": 400},
        )
        assert resp.status_code == 200
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (620, 400)

    def test_encode_explicit_width_only(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "scale": 3, "width": 400})
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (400, 180)

    def test_encode_svg_returns_svg(self, client):
        resp = client.post("/encode/svg", json={"number": "605589605589", "scale": 6})
        assert resp.status_code == 200
        assert "image/svg+xml" in resp.headers["content-type"]
        assert "<svg" in resp.text
        assert 'width="648"' in resp.text

    def test_encode_with_custom_colors(self, client):
        resp = client.post(
            "/encode/svg",
            json={"number": "605589605589", "ink_color": "#FF0000"},
        )
        assert resp.status_code == 200
        assert "#FF0000" in resp.text

    def test_encode_invalid_digits_returns_422(self, client):
        resp = client.post("/encode", json={"number": "12a4"})
        assert resp.status_code == 422

    def test_encode_too_long_returns_422(self, client):
        resp = client.post("/encode", json={"number": "12345678901234"})
        assert resp.status_code == 422

    def test_encode_bad_color_returns_422(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "ink_color": "red"})
        assert resp.status_code == 422

    def test_encode_scale_is_clamped(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "scale": 20})
        assert resp.status_code == 200
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (1296, 720)

        resp = client.post("/encode", json={"number": "123456789012", "scale": 0})
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (216, 120)

    def test_encode_fractional_scale(self, client):
        resp = client.post("/encode/svg", json={"number": "123456789012", "scale": 3.5})
        assert resp.status_code == 200
        assert 'width="378"' in resp.text

    def test_encode_non_positive_dimensions_are_ignored(self, client):
        resp = client.post(
            "/encode",
            json={"number": "123456789012", "scale": 6, "width": -5, "height": 0},
        )
        assert resp.status_code == 200
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (648, 360)

    def test_encode_non_positive_width_keeps_explicit_height(self, client):
        resp = client.post(
            "/encode",
            json={"number": "123456789012", "scale": 6, "width": 0, "height": 400},
        )
        with Image.open(io.BytesIO(resp.content)) as image:
            assert image.size == (648, 400)

    def test_encode_respects_alpha_limits(self, client):
        resp = client.post("/encode", json={"number": "123456789012", "alpha": 200})
        assert resp.status_code == 422

    def test_encode_verify_checksum(self, client):
        resp = client.post(
            "/encode",
            json={"number": "4006381333930", "verify_checksum": True},
        )
        assert resp.status_code == 422



class TestFontConfiguration:
    def test_default_font_when_unset(self, client):
        assert app.state.font_path is None
        resp = client.post("/encode", json={"number": "123456789012"})
        assert resp.status_code == 200

    def test_resolve_font_path_missing_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EAN13_FONT_PATH", str(tmp_path / "missing.ttf"))
        with pytest.raises(FontNotFound, match="missing.ttf"):
            resolve_font_path()

    def test_resolve_font_path_existing_file(self, monkeypatch, tmp_path):
        font = tmp_path / "font.ttf"
        font.write_bytes(b"")
        monkeypatch.setenv("EAN13_FONT_PATH", str(font))
        assert resolve_font_path() == str(font)

    def test_missing_font_fails_at_startup(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EAN13_FONT_PATH", str(tmp_path / "missing.ttf"))
        with pytest.raises(FontNotFound):
            with TestClient(app):
                pass


class TestChecksumEndpoint:
    def test_checksum_completes_number(self, client):
        resp = client.post("/checksum", json={"number": "123456789012"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["number"] == "1234567890128"
        assert data["check_digit"] == 8
        assert len(data["bars"]) == 15

    def test_checksum_pads_short_number(self, client):
        resp = client.post("/checksum", json={"number": "123456"})
        assert resp.json()["number"] == "0000001234565"

    def test_checksum_invalid_returns_422(self, client):
        resp = client.post("/checksum", json={"number": "12a4"})
        assert resp.status_code == 422
