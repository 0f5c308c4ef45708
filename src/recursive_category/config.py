"""Local configuration for recursive_category."""

from __future__ import annotations

import os


DEFAULT_HTML_PARSER = "html.parser"
DEFAULT_LOG_LEVEL = "WARNING"

# BeautifulSoup backend used when parsing list markup ("html.parser" or "lxml").
RECURSIVE_CATEGORY_HTML_PARSER = os.getenv("RECURSIVE_CATEGORY_HTML_PARSER", DEFAULT_HTML_PARSER)
RECURSIVE_CATEGORY_LOG_LEVEL = os.getenv("RECURSIVE_CATEGORY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
