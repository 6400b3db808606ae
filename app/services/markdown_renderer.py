import html
import logging
from typing import List, Optional

import markdown
from latex2mathml.converter import convert as latex_to_mathml
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from app.services.image_service import wrap_images
from app.settings import settings

logger = logging.getLogger(__name__)


MATH_CLASS = "arithmatex"
MATH_ERROR_CLASS = "math-error"
TEX_WRAPS = (("\\(", "\\)"), ("\\[", "\\]"))


def strip_tex_wrap(text: str) -> str:
    text = text.strip()
    for start, end in TEX_WRAPS:
        if text.startswith(start) and text.endswith(end):
            return text[len(start) : -len(end)].strip()
    return text


class MathMLTreeprocessor(Treeprocessor):
    """Replace arithmatex TeX nodes with MathML; block nodes render in display mode."""

    def run(self, root):
        nodes = [el for el in root.iter() if el.get("class") == MATH_CLASS]
        for el in nodes:
            source = strip_tex_wrap(html.unescape(el.text or ""))
            display = "block" if el.tag == "div" else "inline"
            try:
                mathml = latex_to_mathml(source, display=display)
            except Exception as e:
                logger.warning(f"Could not render math {source!r}: {e}")
                el.set("class", f"{MATH_CLASS} {MATH_ERROR_CLASS}")
                continue
            for child in list(el):
                el.remove(child)
            el.text = self.md.htmlStash.store(mathml)
        return None


class MathMLExtension(Extension):
    def extendMarkdown(self, md):
        # After inline parsing so inline math nodes exist
        md.treeprocessors.register(MathMLTreeprocessor(md), "mathml", 17)


class ResponsiveImageTreeprocessor(Treeprocessor):
    def run(self, root):
        wrap_images(root)
        return None


class ResponsiveImageExtension(Extension):
    def extendMarkdown(self, md):
        # After inline parsing so <img> nodes exist, before prettify/serialise
        md.treeprocessors.register(
            ResponsiveImageTreeprocessor(md), "responsive_images", 15
        )


class EscapeHtmlExtension(Extension):
    """Treat raw HTML in the source as text instead of passing it through."""

    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


class MarkdownRenderer:
    """
    Markdown body -> HTML fragment.

    Stages run in a fixed order: block syntax (tables, lists, fenced code with
    Pygments highlighting), math delimiters, inline parsing into an element
    tree, TeX to MathML, the image wrapper transform, then serialisation.
    """

    def __init__(self, code_theme: Optional[str] = None):
        self.code_theme = code_theme or settings.CODE_THEME

    def extensions(self) -> List:
        return [
            "tables",
            "sane_lists",
            "fenced_code",
            "codehilite",
            "pymdownx.arithmatex",
            MathMLExtension(),
            EscapeHtmlExtension(),
            ResponsiveImageExtension(),
        ]

    def extension_configs(self) -> dict:
        return {
            "codehilite": {
                "css_class": "highlight",
                "pygments_style": self.code_theme,
                "noclasses": True,
                "guess_lang": False,
            },
            "pymdownx.arithmatex": {"generic": True},
        }

    def render(self, content: str) -> str:
        md = markdown.Markdown(
            extensions=self.extensions(),
            extension_configs=self.extension_configs(),
            output_format="html",
        )
        return md.convert(content)
