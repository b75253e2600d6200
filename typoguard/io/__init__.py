"""Input components for typoguard.

This package contains file reading, directory expansion, HTTP fetching, and
sitemap manifest parsing used by the pipeline.
"""

from .files import expand_resources, is_sitemap_url, is_url, read_text_file
from .http import HttpFetcher
from .sitemap import parse_sitemap

__all__ = [
    "HttpFetcher",
    "expand_resources",
    "is_sitemap_url",
    "is_url",
    "parse_sitemap",
    "read_text_file",
]
