"""
Unit tests for the tracker's startup services: authentication strategies
and the Markdown renderer.
"""

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from rest_framework.authentication import SessionAuthentication
from rest_framework_simplejwt.authentication import JWTAuthentication

from tracker.apps import get_services
from tracker.authentication import AuthenticationStrategy, load_strategy
from tracker.authentication.bearer import JWTStrategy
from tracker.authentication.session import SessionStrategy
from tracker.markup import MarkdownRenderer


class TestLoadStrategy:
    """Tests for selecting the authentication strategy."""

    def test_session(self):
        assert isinstance(load_strategy("session"), SessionStrategy)

    def test_jwt(self):
        assert isinstance(load_strategy("jwt"), JWTStrategy)

    def test_dotted_path(self):
        strategy = load_strategy("tracker.authentication.session.SessionStrategy")
        assert isinstance(strategy, SessionStrategy)

    def test_unknown_name(self):
        """An unknown strategy should fail at startup, not on the first request."""
        with pytest.raises(ImproperlyConfigured):
            load_strategy("carrier-pigeon")

    def test_not_a_strategy(self):
        with pytest.raises(ImproperlyConfigured):
            load_strategy("tracker.markup.MarkdownRenderer")

    def test_authenticators(self):
        authenticators = JWTStrategy().get_authenticators()
        assert [type(a) for a in authenticators] == [JWTAuthentication, SessionAuthentication]


class TestServices:
    """Tests for the services built in TrackerConfig.ready()."""

    def test_services_are_built_once(self):
        config = apps.get_app_config("tracker")
        assert get_services() is config
        assert isinstance(config.authentication, AuthenticationStrategy)
        assert isinstance(config.markdown, MarkdownRenderer)

    def test_strategy_follows_setting(self):
        """Test settings select the session strategy."""
        assert isinstance(get_services().authentication, SessionStrategy)


class TestMarkdownRenderer:
    """Tests for Markdown rendering of comment bodies."""

    def test_renders_markdown(self):
        html = MarkdownRenderer().render("Seen this **twice**.")
        assert html == "<p>Seen this <strong>twice</strong>.</p>"

    def test_empty(self):
        assert MarkdownRenderer().render("") == ""
        assert MarkdownRenderer().render(None) == ""

    def test_fenced_code(self):
        html = MarkdownRenderer().render("```\nraise Boom\n```")
        assert "<code>" in html
        assert "raise Boom" in html

    def test_strips_scripts(self):
        """Raw HTML outside the allow-list should be removed."""
        html = MarkdownRenderer().render("<script>alert(1)</script>\n\nhello")
        assert "<script" not in html
        assert "hello" in html

    def test_strips_unsafe_attributes(self):
        html = MarkdownRenderer().render('<a href="/x" onclick="steal()">x</a>')
        assert "onclick" not in html
        assert 'href="/x"' in html

    def test_callable(self):
        renderer = MarkdownRenderer()
        assert renderer("*hi*") == renderer.render("*hi*")

    def test_custom_allow_list(self):
        """Tags can be narrowed per renderer."""
        html = MarkdownRenderer(allowed_tags=["p"]).render("**bold**")
        assert html == "<p>bold</p>"


class TestCrossOriginSettings:
    """Cross-origin access is opt-in through the environment."""

    def test_no_origins_trusted_by_default(self, settings):
        assert settings.CORS_ALLOWED_ORIGINS == []
        assert settings.CSRF_TRUSTED_ORIGINS == []
