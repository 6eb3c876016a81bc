"""
Router for unit display utilities.
"""

from fastapi import APIRouter, Query

from ..quantity import abbreviate
from ..schemas import UnitAbbreviationOut

router = APIRouter()


@router.get("/abbreviate", response_model=UnitAbbreviationOut)
def abbreviate_unit(unit: str = Query("", max_length=100)):
    """
    Short display form of a unit ("tablespoons" -> "tbsp").
    Unknown units are echoed back unchanged.
    """
    return UnitAbbreviationOut(unit=unit, abbreviation=abbreviate(unit))
