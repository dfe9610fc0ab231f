"""
Test suite for hero schemas.

System role: Verification of hero record validation
"""

import pytest
from pydantic import ValidationError

from herodesk.models.hero import CreateHeroRequest, Hero


class TestHeroSchemas:
    """Test suite for Hero and CreateHeroRequest."""

    def test_hero_should_reject_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            Hero(id=11, name="")

    def test_create_request_should_reject_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            CreateHeroRequest(name="")

    def test_hero_should_coerce_numeric_id(self) -> None:
        assert Hero.model_validate({"id": "12", "name": "Narco"}) == Hero(id=12, name="Narco")
