from breed_data import (
    BREED_DATA,
    DEFAULT_HABITAT,
    DEFAULT_IMAGE_URL,
    breed_names,
    build_custom_breed,
    builtin_breeds,
    find_breed,
    search_breeds,
)


def _custom_fields(**overrides):
    fields = {
        "name": "Backyard Mix",
        "description": "A friendly mixed flock hen.",
        "origin": "Somewhere",
        "egg_production": "200 eggs per year",
        "temperament": "Calm",
        "size": "Medium",
        "purpose": "Eggs",
        "lifespan": "6 years",
    }
    fields.update(overrides)
    return fields


def test_catalog_names_and_ids_are_unique():
    breeds = builtin_breeds()
    assert len(breeds) == len(BREED_DATA) == 42
    assert len({b["id"] for b in breeds}) == len(breeds)
    assert breed_names()[:3] == ["Sussex", "Rhode Island Red", "Leghorn"]


def test_records_carry_coordinates():
    silkie = find_breed("silkie", builtin_breeds())
    assert silkie["name"] == "Silkie"
    assert set(silkie["coordinates"]) == {"latitude", "longitude"}


def test_search_is_case_insensitive_across_fields():
    breeds = builtin_breeds()
    assert [b["name"] for b in search_breeds("silkie", breeds)] == ["Silkie"]
    by_origin = [b["name"] for b in search_breeds("CHINA", breeds)]
    assert "Silkie" in by_origin and "Cochin" in by_origin
    assert search_breeds("", breeds) == breeds
    assert search_breeds("zzzz-no-such-breed", breeds) == []


def test_find_breed_unknown_id():
    assert find_breed("nope", builtin_breeds()) is None


def test_custom_breed_requires_fields():
    breed, missing = build_custom_breed({"name": "Lonely", "size": "  "})
    assert breed is None
    assert "size" in missing and "description" in missing
    assert "name" not in missing


def test_custom_breed_defaults():
    breed, missing = build_custom_breed(_custom_fields())
    assert missing == []
    assert breed["id"].startswith("custom-")
    assert breed["image_url"] == DEFAULT_IMAGE_URL
    assert breed["habitat"] == DEFAULT_HABITAT
    assert breed["colors"] == ["Backyard Mix"]
    assert breed["wikipedia_link"] == "https://en.wikipedia.org/wiki/Backyard_Mix_chicken"
    assert breed["coordinates"] == {"latitude": 0.0, "longitude": 0.0}


def test_custom_breed_parses_colors_and_coordinates():
    breed, _ = build_custom_breed(_custom_fields(colors="Black, White", latitude="12.5", longitude="bad"))
    assert breed["colors"] == ["Black", "White"]
    assert breed["coordinates"] == {"latitude": 12.5, "longitude": 0.0}
