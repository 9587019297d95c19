"""Tests EmailBuilder — session d'édition, échanges backend mockés."""
import logging
from unittest.mock import MagicMock

import pytest
import requests

from email_builder.builder import EmailBuilder
from email_builder.client import BackendClient
from email_builder.errors import BackendError
from email_builder.sections import ImageSection, CTASection

LAYOUT = "<h1>{{title}}</h1>{% for section in sections %}{% endfor %}<p>{{footer}}</p>"


@pytest.fixture
def client():
    return MagicMock(spec=BackendClient)


@pytest.fixture
def builder(client):
    return EmailBuilder(layout=LAYOUT, client=client)


# ── État initial + champs scalaires ──────────────────────────────────────────

class TestState:
    def test_defaults(self, builder):
        assert builder.config.title == "Title"
        assert builder.config.footer == "© 2025 My Company"
        assert builder.sections == []

    def test_set_field_wire_name(self, builder):
        builder.set_field("bgColor", "#ff0000")
        assert builder.config.bg_color == "#ff0000"

    def test_set_field_python_name(self, builder):
        builder.set_field("text_color", "#00ff00")
        assert builder.config.text_color == "#00ff00"

    def test_set_field_unknown(self, builder):
        with pytest.raises(ValueError):
            builder.set_field("sections", "x")

    def test_config_replaced_not_mutated(self, builder):
        before = builder.config
        builder.add_section("text")
        assert before.sections == []
        assert len(builder.config.sections) == 1


# ── Sections ─────────────────────────────────────────────────────────────────

class TestSections:
    def test_add_update_preview(self, builder):
        sec = builder.add_section("text")
        builder.update_section(sec.id, "content", "<p>Hello</p>")
        html = builder.preview()
        assert "<p>Hello</p>" in html
        assert "<h1>Title</h1>" in html

    def test_move_section(self, builder):
        text = builder.add_section("text")
        cta = builder.add_section("cta")
        builder.move_section(0, 1)
        assert [s.id for s in builder.sections] == [cta.id, text.id]
        html = builder.preview()
        assert html.index("Click Me") < html.index('<div style="margin-bottom:1rem;"></div>')

    def test_move_cancelled(self, builder):
        builder.add_section("text")
        builder.add_section("cta")
        before = builder.preview()
        builder.move_section(0, None)
        assert builder.preview() == before

    def test_remove_section(self, builder):
        sec = builder.add_section("image")
        builder.remove_section(sec.id)
        builder.remove_section(sec.id)
        assert builder.sections == []

    def test_get_section(self, builder):
        sec = builder.add_section("cta")
        assert builder.get_section(sec.id) == sec
        assert builder.get_section("absent") is None

    def test_preview_without_layout(self, client):
        assert EmailBuilder(client=client).preview() == ""


# ── Échanges backend ─────────────────────────────────────────────────────────

class TestBackendExchanges:
    def test_upload_success_sets_url(self, builder, client):
        client.upload_image.return_value = "http://localhost:3000/uploads/abc.png"
        sec = builder.add_section("image")
        assert builder.upload_image(sec.id, "abc.png", b"data") is True
        assert builder.get_section(sec.id).url == "http://localhost:3000/uploads/abc.png"
        client.upload_image.assert_called_once_with("abc.png", b"data")

    def test_failed_upload_leaves_state_unchanged(self, builder, client, caplog):
        client.upload_image.side_effect = BackendError("POST /uploadImage → HTTP 500", status_code=500)
        image = builder.add_section("image")
        cta = builder.add_section("cta")
        builder.update_section(cta.id, "url", "https://shop")
        before = builder.config

        with caplog.at_level(logging.ERROR):
            assert builder.upload_image(image.id, "x.png", b"data") is False

        assert builder.config == before
        assert builder.get_section(image.id).url == ""
        assert builder.get_section(cta.id).url == "https://shop"
        assert "Upload image impossible" in caplog.text

    def test_last_upload_wins(self, builder, client):
        client.upload_image.side_effect = ["http://h/uploads/1.png", "http://h/uploads/2.png"]
        sec = builder.add_section("image")
        builder.upload_image(sec.id, "1.png", b"1")
        builder.upload_image(sec.id, "2.png", b"2")
        assert builder.get_section(sec.id).url == "http://h/uploads/2.png"

    def test_load_layout(self, client):
        client.fetch_layout.return_value = "<p>{{title}}</p>"
        b = EmailBuilder(client=client)
        assert b.load_layout() is True
        assert b.preview() == "<p>Title</p>"

    def test_load_layout_failure_keeps_layout(self, builder, client):
        client.fetch_layout.side_effect = BackendError("GET /getEmailLayout : boom")
        assert builder.load_layout() is False
        assert builder.layout == LAYOUT

    def test_save_config(self, builder, client):
        client.save_config.return_value = "Config saved (logged to console)!"
        assert builder.save_config() is True
        client.save_config.assert_called_once_with(builder.config)

    def test_save_config_failure(self, builder, client):
        client.save_config.side_effect = BackendError("boom")
        assert builder.save_config() is False

    def test_download_writes_file(self, builder, client, tmp_path):
        client.render.return_value = b"<html>final</html>"
        dest = builder.download(tmp_path)
        assert dest == tmp_path / "emailTemplate.html"
        assert dest.read_bytes() == b"<html>final</html>"

    def test_download_failure(self, builder, client, tmp_path):
        client.render.side_effect = BackendError("HTTP 500", status_code=500)
        before = builder.config
        assert builder.download(tmp_path) is None
        assert not (tmp_path / "emailTemplate.html").exists()
        assert builder.config == before


# ── Backend renvoyant une page HTML au lieu de JSON ──────────────────────────

class TestNonJsonBackend:
    @pytest.fixture
    def proxy_builder(self):
        resp = MagicMock()
        resp.ok = True
        resp.status_code = 200
        resp.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>proxy page</html>", 0)
        session = MagicMock()
        session.request.return_value = resp
        return EmailBuilder(layout=LAYOUT, client=BackendClient(base_url="http://backend", session=session))

    def test_upload_returns_false(self, proxy_builder):
        sec = proxy_builder.add_section("image")
        before = proxy_builder.config
        assert proxy_builder.upload_image(sec.id, "a.png", b"d") is False
        assert proxy_builder.config == before
        assert proxy_builder.get_section(sec.id).url == ""

    def test_load_layout_returns_false(self, proxy_builder):
        assert proxy_builder.load_layout() is False
        assert proxy_builder.layout == LAYOUT

    def test_save_config_returns_false(self, proxy_builder):
        assert proxy_builder.save_config() is False
