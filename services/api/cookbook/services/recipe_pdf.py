"""
PDF export of a recipe at a given scale.

Same layout as the printable card in the cookbook: centred title, a
"Category | Servings | Total Time" line, then per group the ingredients
as bullets and the numbered instructions.
"""

import io
import logging
import re

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen.canvas import Canvas

from ..quantity import scale_servings
from ..quantity.rational import RationalLike
from ..settings import settings
from .ingredient_render import render_ingredient

logger = logging.getLogger("cookbook.render")

MARGIN = 50
BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"


def pdf_filename(name: str) -> str:
    return re.sub(r'[^a-z0-9]', '_', name or "recipe", flags=re.IGNORECASE) + ".pdf"


def wrap_text(text: str, font_name: str, font_size: int, max_width: float) -> list[str]:
    words = text.split()
    if not words:
        return [""]
    wrapped = []
    current = words[0]
    for w in words[1:]:
        test = current + " " + w
        if stringWidth(test, font_name, font_size) <= max_width:
            current = test
        else:
            wrapped.append(current)
            current = w
    wrapped.append(current)
    return wrapped


def recipe_header(recipe, factor: RationalLike = 1) -> str:
    parts = []
    if recipe.category:
        parts.append(f"Category: {recipe.category}")
    parts.append(f"Servings: {scale_servings(recipe.servings, factor)}")
    if recipe.prep_time or recipe.cook_time:
        parts.append(f"Total Time: {(recipe.prep_time or 0) + (recipe.cook_time or 0)} min")
    return "   |   ".join(parts)


def export_recipe_pdf(recipe, factor: RationalLike = 1) -> bytes:
    """
    Render `recipe` (same shape as export_recipe_text expects) to PDF bytes.
    """
    buf = io.BytesIO()
    c = Canvas(buf, pagesize=letter, pageCompression=int(settings.pdf_page_compression))
    c.setTitle(recipe.name)
    width, height = letter
    max_w = width - 2 * MARGIN
    y = height - MARGIN

    def check_page(needed: float):
        nonlocal y
        if y - needed < MARGIN:
            c.showPage()
            y = height - MARGIN

    def draw_lines(lines: list[str], font: str, size: int, indent: float = 0, leading: float = 14):
        nonlocal y
        c.setFont(font, size)
        for line in lines:
            check_page(leading)
            c.setFont(font, size)
            c.drawString(MARGIN + indent, y, line)
            y -= leading

    c.setFont(BOLD_FONT, 24)
    c.drawCentredString(width / 2, y, recipe.name)
    y -= 36

    draw_lines([recipe_header(recipe, factor)], BODY_FONT, 12, leading=32)

    groups = list(recipe.groups)
    for group in groups:
        if len(groups) > 1:
            check_page(40)
            draw_lines([group.name], BOLD_FONT, 16, leading=22)

        check_page(36)
        draw_lines(["Ingredients"], BOLD_FONT, 14, leading=20)
        for ing in group.ingredients:
            rendered = render_ingredient(ing.amount, ing.unit, ing.name, factor)
            check_page(14)
            c.setFont(BODY_FONT, 11)
            c.drawString(MARGIN, y, "•")
            draw_lines(wrap_text(rendered.line, BODY_FONT, 11, max_w - 12), BODY_FONT, 11, indent=12)

        y -= 10
        check_page(36)
        draw_lines(["Instructions"], BOLD_FONT, 14, leading=20)
        for i, step in enumerate(group.instructions, start=1):
            draw_lines(wrap_text(f"{i}. {step}", BODY_FONT, 11, max_w), BODY_FONT, 11)
            y -= 6
        y -= 14

    c.save()
    logger.debug("Rendered PDF for %r at scale %s", recipe.name, factor)
    return buf.getvalue()
