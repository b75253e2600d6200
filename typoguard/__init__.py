"""Top-level package for typoguard.

This package checks plain text, Markdown, and HTML from local files, web
pages, and sitemap manifests for typos using pluggable backends. The main
orchestration entry point is `TypoCheckPipeline`.
"""

from .pipeline import TypoCheckPipeline

__all__ = ["TypoCheckPipeline", "__version__"]

__version__ = "0.1.0"
