"""
Markdown rendering for comment bodies.

A single MarkdownRenderer is built when the app registry is ready
(``TrackerConfig.ready``) and handed to views, serializers and templates.
It only holds configuration, so one instance serves every request.
"""

import bleach
import markdown as markdown_lib
from django.conf import settings

DEFAULT_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

DEFAULT_ALLOWED_TAGS = [
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "del",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "li",
    "ol",
    "p",
    "pre",
    "strong",
    "table",
    "tbody",
    "td",
    "th",
    "thead",
    "tr",
    "ul",
]

DEFAULT_ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "code": ["class"],
}


class MarkdownRenderer:
    """
    Converts Markdown to sanitized HTML.

    Python-Markdown parser instances carry per-document state, so a fresh
    conversion is run for every call; the renderer itself stays immutable.
    """

    def __init__(self, extensions=None, allowed_tags=None, allowed_attributes=None):
        self.extensions = tuple(extensions if extensions is not None else DEFAULT_EXTENSIONS)
        self.allowed_tags = frozenset(
            allowed_tags if allowed_tags is not None else DEFAULT_ALLOWED_TAGS
        )
        self.allowed_attributes = dict(
            allowed_attributes if allowed_attributes is not None else DEFAULT_ALLOWED_ATTRIBUTES
        )

    @classmethod
    def from_settings(cls):
        return cls(
            extensions=getattr(settings, "MARKDOWN_EXTENSIONS", None),
            allowed_tags=getattr(settings, "MARKDOWN_ALLOWED_TAGS", None),
            allowed_attributes=getattr(settings, "MARKDOWN_ALLOWED_ATTRIBUTES", None),
        )

    def render(self, text):
        if not text:
            return ""
        html = markdown_lib.markdown(text, extensions=list(self.extensions))
        return bleach.clean(
            html,
            tags=self.allowed_tags,
            attributes=self.allowed_attributes,
            strip=True,
        )

    __call__ = render
