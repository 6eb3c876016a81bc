"""Pydantic schemas for the scaling API.

Request/response models for:
- Single amount scaling
- Whole recipe scaling / text export
- Unit abbreviation
"""

from typing import Optional, Literal

from pydantic import BaseModel, Field, field_validator

from .settings import settings


class ScaleFactorMixin(BaseModel):
    factor: float = Field(1.0, gt=0)

    @field_validator("factor")
    @classmethod
    def factor_within_limit(cls, v: float) -> float:
        if v > settings.max_scale_factor:
            raise ValueError(f"factor must be at most {settings.max_scale_factor:g}")
        return v


# --- Single amount ---

class AmountScaleRequest(ScaleFactorMixin):
    amount: str = Field("", max_length=200)


class AmountScaleResponse(BaseModel):
    amount: str
    scaled: str
    kind: Literal["exact", "range", "opaque"]


# --- Recipe ---

class IngredientIn(BaseModel):
    amount: str = ""
    unit: str = ""
    name: str = Field(..., min_length=1, max_length=300)


class IngredientOut(BaseModel):
    amount: str
    unit: str
    name: str
    line: str


class IngredientGroupIn(BaseModel):
    name: str = "Main"
    ingredients: list[IngredientIn] = []
    instructions: list[str] = []


class IngredientGroupOut(BaseModel):
    name: str
    ingredients: list[IngredientOut]
    instructions: list[str]


class RecipeScaleRequest(ScaleFactorMixin):
    name: str = Field(..., min_length=1, max_length=200)
    category: Optional[str] = None
    prep_time: Optional[int] = Field(None, ge=0)
    cook_time: Optional[int] = Field(None, ge=0)
    servings: Optional[int] = Field(None, ge=0)
    groups: list[IngredientGroupIn] = []


class RecipeScaleResponse(BaseModel):
    name: str
    factor: float
    servings: int
    groups: list[IngredientGroupOut]
    text: str


# --- Units ---

class UnitAbbreviationOut(BaseModel):
    unit: str
    abbreviation: str
