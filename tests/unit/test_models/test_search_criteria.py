"""Tests for SearchCriteria model."""

import pytest
from src.models.search_criteria import CRITERIA_SCHEMA_VERSION, SearchCriteria


@pytest.mark.unit
def test_search_criteria_empty_is_unconstrained():
    """Test that an empty blob yields no constraints."""
    criteria = SearchCriteria.model_validate({})

    assert criteria.schema_version == CRITERIA_SCHEMA_VERSION
    assert criteria.statuses == []
    assert criteria.cities == []
    assert criteria.min_price is None
    assert criteria.show_areas is False


@pytest.mark.unit
def test_search_criteria_accepts_camel_case_and_snake_case():
    """Test that wire names and field names both populate the model."""
    camel = SearchCriteria.model_validate({"propertyTypes": ["condo"], "maxPrice": 600000, "zipCode": "02110"})
    snake = SearchCriteria.model_validate({"property_types": ["condo"], "max_price": 600000, "zip_code": "02110"})

    assert camel == snake
    assert camel.max_price == 600000


@pytest.mark.unit
def test_search_criteria_malformed_values_are_unconstrained():
    """Test that garbage values degrade to 'no constraint' instead of raising."""
    criteria = SearchCriteria.model_validate({
        "minPrice": "not a number",
        "maxPrice": "$650,000",
        "bedrooms": 0,
        "bathrooms": -1,
        "cities": "Boston",
        "statuses": {"unexpected": "shape"},
        "state": ["MA"],
        "showAreas": "yes",
        "somethingNew": True,
    })

    assert criteria.min_price is None
    assert criteria.max_price == 650000
    assert criteria.bedrooms is None
    assert criteria.bathrooms is None
    assert criteria.cities == ["Boston"]
    assert criteria.statuses == []
    assert criteria.state is None
    assert criteria.show_areas is True


@pytest.mark.unit
def test_search_criteria_folds_legacy_city_keys():
    """Test that older 'towns' and 'city' keys map onto cities."""
    assert SearchCriteria.model_validate({"towns": ["Salem", "Lynn"]}).cities == ["Salem", "Lynn"]
    assert SearchCriteria.model_validate({"city": "Worcester"}).cities == ["Worcester"]
    assert SearchCriteria.model_validate({"cities": ["Boston"], "city": "Worcester"}).cities == ["Boston"]


@pytest.mark.unit
def test_search_criteria_non_dict_blob():
    """Test that a non-object blob deserializes to empty criteria."""
    assert SearchCriteria.model_validate(None).cities == []
    assert SearchCriteria.model_validate("garbage").max_price is None


@pytest.mark.unit
def test_search_criteria_to_blob_uses_wire_names():
    """Test serialization back to the stored camelCase shape."""
    blob = SearchCriteria.model_validate({"state": "MA", "maxPrice": 600000, "showAreas": True}).to_blob()

    assert blob["state"] == "MA"
    assert blob["maxPrice"] == 600000
    assert blob["showAreas"] is True
    assert blob["schemaVersion"] == CRITERIA_SCHEMA_VERSION
    assert "zipCode" not in blob
