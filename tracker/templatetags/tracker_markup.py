from django import template
from django.utils.safestring import mark_safe

from tracker.apps import get_services

register = template.Library()


@register.filter
def markdown(text):
    """Render Markdown to sanitized HTML."""
    return mark_safe(get_services().markdown.render(text))
