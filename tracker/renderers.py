"""
Response renderers for tracker views.

HTML and JSON come from DRF; Atom feeds are built with Django's feed
generator from a plain dict:

    {
        "title": "...",
        "link": "https://...",
        "description": "...",
        "items": [{"title": ..., "link": ..., "description": ..., "unique_id": ...,
                   "pubdate": ..., "updateddate": ..., "author_name": ...}],
    }
"""

from django.utils.feedgenerator import Atom1Feed
from rest_framework.renderers import BaseRenderer


class AtomRenderer(BaseRenderer):
    media_type = "application/atom+xml"
    format = "atom"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        # Error bodies have no Atom representation.
        if not isinstance(data, dict) or "items" not in data:
            return b""

        feed = Atom1Feed(
            title=data["title"],
            link=data["link"],
            description=data.get("description", ""),
            feed_url=data.get("feed_url"),
            author_name=data.get("author_name"),
        )
        for item in data["items"]:
            feed.add_item(**item)
        return feed.writeString(self.charset).encode(self.charset)
