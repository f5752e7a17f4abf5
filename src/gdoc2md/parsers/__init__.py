#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document producers that build a document tree from source formats.

- GoogleDocsParser: Google Docs API ``documents.get`` JSON
- HtmlParser: HTML through BeautifulSoup
"""

from gdoc2md.parsers.base import BaseParser
from gdoc2md.parsers.gdocs import GoogleDocsParser
from gdoc2md.parsers.html import HtmlParser

__all__ = ["BaseParser", "GoogleDocsParser", "HtmlParser"]
