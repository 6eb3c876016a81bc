"""
Router for recipe scaling.

Amounts are scaled for presentation only; nothing is written back.
"""

import logging

from fastapi import APIRouter, Request, Response

from ..limiter import limiter
from ..quantity import kind_of, parse, scale, format_quantity, scale_servings
from ..schemas import (
    AmountScaleRequest,
    AmountScaleResponse,
    IngredientGroupOut,
    IngredientOut,
    RecipeScaleRequest,
    RecipeScaleResponse,
)
from ..services.ingredient_render import export_recipe_text, render_ingredient
from ..services.recipe_pdf import export_recipe_pdf, pdf_filename
from ..settings import settings

router = APIRouter()
logger = logging.getLogger("cookbook.api")


@router.post("/amount", response_model=AmountScaleResponse)
def scale_single_amount(req: AmountScaleRequest):
    """Scale one free-form amount ("1 1/2", "2-3", "a pinch")."""
    scaled = scale(parse(req.amount), req.factor)
    return AmountScaleResponse(
        amount=req.amount,
        scaled=format_quantity(scaled),
        kind=kind_of(scaled),
    )


@router.post("/recipe", response_model=RecipeScaleResponse)
@limiter.limit(settings.export_rate_limit)
def scale_recipe(request: Request, req: RecipeScaleRequest):
    """
    Scale every ingredient of a recipe and build the plain-text export.
    """
    groups = []
    for group in req.groups:
        ingredients = []
        for ing in group.ingredients:
            rendered = render_ingredient(ing.amount, ing.unit, ing.name, req.factor)
            ingredients.append(IngredientOut(
                amount=rendered.amount,
                unit=rendered.unit,
                name=rendered.name,
                line=rendered.line,
            ))
        groups.append(IngredientGroupOut(
            name=group.name,
            ingredients=ingredients,
            instructions=group.instructions,
        ))

    logger.info("Scaled recipe %r by %s (%d groups)", req.name, req.factor, len(groups))

    return RecipeScaleResponse(
        name=req.name,
        factor=req.factor,
        servings=scale_servings(req.servings, req.factor),
        groups=groups,
        text=export_recipe_text(req, req.factor),
    )


@router.post("/recipe/pdf")
@limiter.limit(settings.export_rate_limit)
def scale_recipe_pdf(request: Request, req: RecipeScaleRequest):
    """
    Printable PDF of the recipe at the requested scale.
    """
    content = export_recipe_pdf(req, req.factor)
    logger.info("Exported PDF for %r at scale %s (%d bytes)", req.name, req.factor, len(content))
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{pdf_filename(req.name)}"'},
    )
