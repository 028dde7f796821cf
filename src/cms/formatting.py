"""
Text formatting helpers matching the CMS's slug rules.
"""

import re
import unicodedata


def remove_accents(text: str) -> str:
    """Fold accented characters to their closest ASCII form."""
    normalized = unicodedata.normalize('NFKD', text)
    return normalized.encode('ascii', 'ignore').decode('ascii')


def sanitize_title(title: str) -> str:
    """
    Build a URL-safe slug the way the CMS does for titles and nicenames.

    Lower-cases, folds accents, turns whitespace and dots into hyphens,
    drops every other character that is not [a-z0-9_-] and collapses
    repeated hyphens.

    Examples:
        >>> sanitize_title('Müller Zoë')
        'muller-zoe'
        >>> sanitize_title('smith.john')
        'smith-john'
    """
    slug = remove_accents(title or '').lower()
    slug = re.sub(r'<[^>]*>', '', slug)
    slug = re.sub(r'[\s.]+', '-', slug)
    slug = re.sub(r'[^a-z0-9_-]', '', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip('-')
