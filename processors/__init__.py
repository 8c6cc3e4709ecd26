"""Processors package for ListPlayground.

This package renders built list sections to output formats:

- **text_renderer**: Boxed monospace text with emulated indents and tab stops
- **docx_writer**: Word documents with native hanging indents and tab stops
- **markdown_writer**: Markdown documents
"""

from processors.text_renderer import TextRenderer, write_text_document
from processors.docx_writer import create_docx_document, sanitize_for_xml
from processors.markdown_writer import create_markdown_document

__all__ = [
    # Text
    "TextRenderer",
    "write_text_document",
    # Documents
    "create_docx_document",
    "create_markdown_document",
    "sanitize_for_xml",
]
