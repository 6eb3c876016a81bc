"""Unit abbreviations for ingredient display."""

# Lower-cased unit -> display abbreviation
UNIT_ABBREVIATIONS = {
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cups",
    "ounce": "oz",
    "ounces": "oz",
    "pound": "lb",
    "pounds": "lbs",
    "gram": "g",
    "grams": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "milliliter": "ml",
    "milliliters": "ml",
    "liter": "L",
    "liters": "L",
    "pinch": "pinch",
    "dash": "dash",
}


def abbreviate(unit: str) -> str:
    """
    Abbreviate a unit name ("Tablespoons" -> "tbsp").

    Exact match only, so ingredient words that merely contain a unit are
    left alone. Unknown units come back exactly as given.
    """
    if not unit:
        return ""
    return UNIT_ABBREVIATIONS.get(unit.strip().lower(), unit)
