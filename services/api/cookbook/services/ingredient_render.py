"""
Presentation helpers built on the quantity engine.

Used by every place a scaled recipe is shown: the detail view, the
clipboard export and the PDF export all render an ingredient as
"<amount> <unit> <name>".
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..quantity import abbreviate, scale_amount, scale_servings
from ..quantity.rational import RationalLike

logger = logging.getLogger("cookbook.render")


@dataclass(frozen=True)
class RenderedIngredient:
    amount: str
    unit: str
    name: str
    line: str


def _join(*parts: str) -> str:
    return re.sub(r'\s+', ' ', " ".join(p for p in parts if p)).strip()


def render_ingredient(
    amount: Optional[str],
    unit: Optional[str],
    name: Optional[str],
    factor: RationalLike = 1,
) -> RenderedIngredient:
    """Scale one ingredient's amount and abbreviate its unit."""
    scaled = scale_amount(amount or "", factor)
    short_unit = abbreviate(unit or "").strip()
    clean_name = (name or "").strip()
    return RenderedIngredient(
        amount=scaled,
        unit=short_unit,
        name=clean_name,
        line=_join(scaled, short_unit, clean_name),
    )


def export_recipe_text(recipe, factor: RationalLike = 1) -> str:
    """
    Plain-text export of a recipe at the given scale (clipboard format).

    `recipe` needs name, category, prep_time, cook_time, servings and
    groups; each group has name, ingredients (amount/unit/name) and
    instructions.
    """
    lines = [recipe.name, ""]
    if recipe.category:
        lines.append(f"Category: {recipe.category}")
    if recipe.prep_time:
        lines.append(f"Prep Time: {recipe.prep_time} min")
    if recipe.cook_time:
        lines.append(f"Cook Time: {recipe.cook_time} min")
    if recipe.servings:
        servings = scale_servings(recipe.servings, factor)
        lines.append(f"Servings: {servings}")
    lines.append("")

    groups = list(recipe.groups)
    for i, group in enumerate(groups):
        if len(groups) > 1:
            lines.append(f"--- {group.name} ---")
            lines.append("")
        lines.append("Ingredients:")
        for ing in group.ingredients:
            rendered = render_ingredient(ing.amount, ing.unit, ing.name, factor)
            lines.append(f"- {rendered.line}")
        lines.append("")
        lines.append("Instructions:")
        for j, step in enumerate(group.instructions, start=1):
            lines.append(f"{j}. {step}")
        if i < len(groups) - 1:
            lines.append("")

    logger.debug("Exported %r with %d group(s) at scale %s", recipe.name, len(groups), factor)
    return "\n".join(lines) + "\n"
