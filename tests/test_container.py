"""Tests for container wiring."""

import logging

from recipe_nutrition.containers import build_container
from tests.conftest import make_recipe


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.analysis_service.debug is True
    assert logging.getLogger("recipe_nutrition").level == logging.DEBUG

    recipe = make_recipe("salmon", "garlic")
    assert container.analysis_service.analyze(recipe).omega3.epa == 0.4
    assert [c.id for c in container.superfood_service.detect(recipe)] == [
        "salmon",
        "garlic",
    ]
