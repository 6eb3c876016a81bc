import re
from types import SimpleNamespace

from cookbook.services.recipe_pdf import export_recipe_pdf, pdf_filename, recipe_header, wrap_text


def _recipe(groups, **kwargs):
    fields = dict(name="Pancakes", category="Breakfast", prep_time=10, cook_time=15, servings=4)
    fields.update(kwargs)
    return SimpleNamespace(groups=groups, **fields)

def _group(name, ingredients, instructions):
    return SimpleNamespace(
        name=name,
        ingredients=[SimpleNamespace(amount=a, unit=u, name=n) for a, u, n in ingredients],
        instructions=instructions,
    )


def test_header_has_scaled_servings_and_total_time():
    assert recipe_header(_recipe([]), 1.5) == "Category: Breakfast   |   Servings: 6   |   Total Time: 25 min"
    assert recipe_header(_recipe([], prep_time=None, cook_time=None), 1) == "Category: Breakfast   |   Servings: 4"

def test_pdf_contains_scaled_lines():
    group = _group("Main", [("1 1/2", "cups", "flour"), ("", "", "salt to taste")], ["Mix well"])
    content = export_recipe_pdf(_recipe([group]), 2)

    assert content.startswith(b"%PDF")
    assert b"3 cups flour" in content
    assert b"salt to taste" in content
    assert b"1. Mix well" in content
    assert b"Servings: 8" in content

def test_pdf_multiple_groups_and_many_lines():
    dough = _group("Dough", [("1/2", "cup", "water")] * 80, ["Knead " * 40])
    sauce = _group("Sauce", [("2-3", "cloves", "garlic")], ["Simmer"])
    content = export_recipe_pdf(_recipe([dough, sauce]), 0.5)

    assert b"1/4 cup water" in content
    assert b"1-1 1/2 cloves garlic" in content
    assert b"Dough" in content and b"Sauce" in content
    # 80 ingredient rows do not fit on one letter page
    page_counts = [int(n) for n in re.findall(rb"/Count (\d+)", content)]
    assert max(page_counts) >= 2

def test_wrap_text():
    lines = wrap_text("word " * 60, "Helvetica", 11, 200)
    assert len(lines) > 1
    assert " ".join(lines) == ("word " * 60).strip()
    assert wrap_text("", "Helvetica", 11, 200) == [""]

def test_pdf_filename():
    assert pdf_filename("Mom's Pie!") == "Mom_s_Pie_.pdf"
