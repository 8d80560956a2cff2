"""Page template tests."""

import pytest

from synthesis import TemplateLibrary, all_templates, get_template_info


@pytest.mark.unit
def test_get_template_info():
    template = get_template_info("ecommerce-landing")
    assert template.name == "E-commerce Landing"
    assert template.sections["main"] == ["ui.productGrid", "ui.filters", "ui.cta"]
    assert get_template_info("missing") is None


@pytest.mark.unit
def test_all_templates_by_priority():
    ids = [t.id for t in all_templates()]
    assert ids == ["ecommerce-landing", "hero-main-footer", "cards-landing", "one-column"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("An online store with a cart", "ecommerce-landing"),
        ("интернет-магазин цветов", "ecommerce-landing"),
        ("Portfolio of our projects", "cards-landing"),
        ("A promo landing", "one-column"),
    ],
)
def test_select_by_trigger(text, expected):
    assert TemplateLibrary.select(text).id == expected


@pytest.mark.unit
def test_select_no_trigger():
    assert TemplateLibrary.select("zzz") is None
