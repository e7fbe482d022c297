import io
import os
import random
from unittest.mock import MagicMock, patch

import pytest

import settings
from app import create_app
from breed_store import BreedStore
from errors import TransportError
from matcher import CatalogMatcher
from openai_api import IdentificationResult


@pytest.fixture
def fake_client():
    client = MagicMock()
    client.identify.return_value = IdentificationResult(breed_name="Silkie")
    return client


@pytest.fixture
def entitlement():
    return {"premium": True}


@pytest.fixture
def app(tmp_path, fake_client, entitlement):
    app = create_app(
        client=fake_client,
        matcher=CatalogMatcher(random.Random(42)),
        store=BreedStore(str(tmp_path / "data")),
        is_entitled=lambda: entitlement["premium"],
        config={"UPLOAD_FOLDER": str(tmp_path / "uploads"), "TESTING": True},
    )
    return app


@pytest.fixture
def http(app):
    return app.test_client()


def _upload(http, data=b"jpeg-bytes", filename="hen.jpg"):
    return http.post(
        "/identify",
        data={"image": (io.BytesIO(data), filename)},
        content_type="multipart/form-data",
    )


def test_identify_match_is_recorded(http, fake_client):
    resp = _upload(http)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["matched"] is True
    assert body["breeds"][0]["name"] == "Silkie"
    assert [b["match_confidence"] for b in body["breeds"]] == [90, 80, 70]
    fake_client.identify.assert_called_once_with(b"jpeg-bytes")

    history = http.get("/history").get_json()["breeds"]
    assert [b["name"] for b in history] == ["Silkie"]
    saved = http.get("/saved").get_json()["breeds"]
    assert [b["name"] for b in saved] == ["Silkie"]


def test_identify_failure_still_returns_candidates(http, fake_client):
    fake_client.identify.return_value = IdentificationResult(error=TransportError("down"))

    resp = _upload(http)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["state"] == "fallback"
    assert body["error"] == "TransportError"
    assert len(body["breeds"]) == 3
    assert http.get("/history").get_json()["breeds"] == []


def test_substituted_label_is_not_recorded(http, fake_client):
    fake_client.identify.return_value = IdentificationResult(breed_name="Golden Silkie")

    body = _upload(http).get_json()

    assert body["matched"] is False
    assert body["error"] == "UnknownLabelError"
    assert http.get("/history").get_json()["breeds"] == []


def test_identify_requires_image(http):
    resp = http.post("/identify", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_identify_requires_premium(http, entitlement, fake_client):
    entitlement["premium"] = False
    assert _upload(http).status_code == 402
    fake_client.identify.assert_not_called()


def test_listing_locks_breeds_for_free_users(http, entitlement):
    entitlement["premium"] = False
    body = http.get("/breeds").get_json()
    locked = [b["locked"] for b in body["breeds"]]
    assert locked[:3] == [False, False, False]
    assert all(locked[3:])
    assert body["premium"] is False

    assert http.get("/breeds/sussex").status_code == 200
    assert http.get("/breeds/silkie").status_code == 402


def test_listing_search(http):
    body = http.get("/breeds?q=silkie").get_json()
    assert [b["name"] for b in body["breeds"]] == ["Silkie"]
    assert body["breeds"][0]["locked"] is False


def test_breed_detail(http):
    assert http.get("/breeds/silkie").get_json()["saved"] is False
    assert http.get("/breeds/no-such-breed").status_code == 404


def test_save_and_unsave(http):
    assert http.post("/saved/silkie").status_code == 201
    assert http.post("/saved/silkie").status_code == 200
    assert http.get("/breeds/silkie").get_json()["saved"] is True
    assert http.delete("/saved/silkie").status_code == 200
    assert http.delete("/saved/silkie").status_code == 404
    assert http.post("/saved/no-such-breed").status_code == 404


def test_history_delete(http):
    _upload(http)
    assert http.delete("/history/silkie").status_code == 200
    assert http.delete("/history/silkie").status_code == 404


def test_custom_breed_lifecycle(http, fake_client):
    form = {
        "name": "Backyard Mix",
        "description": "A friendly mixed flock hen.",
        "origin": "Somewhere",
        "egg_production": "200 eggs per year",
        "temperament": "Calm",
        "size": "Medium",
        "purpose": "Eggs",
        "lifespan": "6 years",
        "colors": ["Black", "White"],
        "image": (io.BytesIO(b"fake-image"), "My Hen.JPG"),
    }
    resp = http.post("/custom", data=form, content_type="multipart/form-data")
    assert resp.status_code == 201
    breed = resp.get_json()
    assert breed["colors"] == ["Black", "White"]
    assert breed["image_url"].startswith("/uploads/")
    assert http.get(breed["image_url"]).data == b"fake-image"

    names = [b["name"] for b in http.get("/breeds").get_json()["breeds"]]
    assert names[-1] == "Backyard Mix"
    assert http.get(f"/breeds/{breed['id']}").status_code == 200

    assert http.delete(f"/custom/{breed['id']}").status_code == 200
    assert http.get("/custom").get_json()["breeds"] == []


def test_custom_breed_validation(http):
    resp = http.post("/custom", data={"name": "Nameless"}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert "description" in resp.get_json()["missing"]


def test_custom_breed_never_joins_identification(app):
    workflow = app.extensions["chicken_ai"]["workflow"]
    assert all(not b.get("custom") for b in workflow.catalog)


def test_free_search_unlocks_first_hits(http, entitlement):
    entitlement["premium"] = False
    body = http.get("/breeds?q=silkie").get_json()
    assert [(b["name"], b["locked"]) for b in body["breeds"]] == [("Silkie", False)]

    assert http.get("/breeds/silkie?q=silkie").status_code == 200
    assert http.get("/breeds/silkie").status_code == 402


def test_free_search_locks_past_the_limit(http, entitlement):
    entitlement["premium"] = False
    breeds = http.get("/breeds?q=calm").get_json()["breeds"]
    assert len(breeds) > 3
    assert [b["locked"] for b in breeds[:3]] == [False, False, False]
    assert all(b["locked"] for b in breeds[3:])
    assert http.get(f"/breeds/{breeds[3]['id']}?q=calm").status_code == 402


def test_identify_survives_history_write_failure(http, app):
    with patch("breed_store.os.replace", side_effect=OSError("disk full")):
        resp = _upload(http)

    assert resp.status_code == 200
    assert resp.get_json()["breeds"][0]["name"] == "Silkie"
    assert http.get("/history").get_json()["breeds"] == []
    assert os.listdir(app.extensions["chicken_ai"]["store"].data_dir) == []


def test_save_write_failure_is_reported(http):
    with patch("breed_store.os.replace", side_effect=OSError("disk full")):
        resp = http.post("/saved/silkie")
    assert resp.status_code == 503
    assert http.get("/saved").get_json()["breeds"] == []


def test_toggle_saved_route(http):
    assert http.post("/saved/silkie/toggle").get_json() == {"saved": True}
    assert http.get("/breeds/silkie").get_json()["saved"] is True
    assert http.post("/saved/silkie/toggle").get_json() == {"saved": False}
    assert http.post("/saved/no-such-breed/toggle").status_code == 404


def test_rejected_custom_breed_leaves_no_upload(http, app):
    form = {"name": "Nameless", "image": (io.BytesIO(b"fake-image"), "hen.jpg")}
    resp = http.post("/custom", data=form, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []


def test_upload_size_is_capped(http, app, fake_client):
    assert create_app(client=fake_client, store=app.extensions["chicken_ai"]["store"],
                      config={"UPLOAD_FOLDER": app.config["UPLOAD_FOLDER"]}
                      ).config["MAX_CONTENT_LENGTH"] == settings.MAX_UPLOAD_BYTES

    app.config["MAX_CONTENT_LENGTH"] = 1024
    resp = _upload(http, data=b"x" * 4096)
    assert resp.status_code == 413
    fake_client.identify.assert_not_called()


def test_articles_listing_and_detail(http, entitlement):
    entitlement["premium"] = False
    articles = http.get("/articles").get_json()["articles"]
    assert len(articles) == 11
    assert [a["locked"] for a in articles[:3]] == [False, False, False]
    assert all(a["locked"] for a in articles[3:])

    first = http.get(f"/articles/{articles[0]['id']}")
    assert first.status_code == 200
    assert first.get_json()["reading_time"] == "5 min read"
    assert http.get(f"/articles/{articles[5]['id']}").status_code == 402
    assert http.get("/articles/no-such-article").status_code == 404


def test_article_search_for_free_users(http, entitlement):
    entitlement["premium"] = False
    hits = http.get("/articles?q=heritage").get_json()["articles"]
    assert hits[0]["title"] == "Heritage Breeds: Preserving Poultry Biodiversity"
    assert not hits[0]["locked"]
    assert http.get(f"/articles/{hits[0]['id']}?q=heritage").status_code == 200

    entitlement["premium"] = True
    assert http.get(f"/articles/{hits[0]['id']}").status_code == 200
