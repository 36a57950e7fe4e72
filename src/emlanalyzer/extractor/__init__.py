"""Email feature extraction utilities."""

from .assets import AssetResolver
from .css import CssCollector
from .document import Document, Element
from .html import HtmlCollector

__all__ = ["AssetResolver", "CssCollector", "Document", "Element", "HtmlCollector"]
