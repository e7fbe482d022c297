from unittest.mock import MagicMock

import pytest

from conftest import completion, make_response
from errors import ImageEncodingError, UnexpectedStatusError, UnknownLabelError
from identification import FALLBACK, RESOLVED, IdentificationWorkflow
from openai_api import IdentificationResult


@pytest.fixture
def workflow(client, matcher, catalog):
    return IdentificationWorkflow(client, matcher, catalog)


def _distinct(breeds):
    return len({b["id"] for b in breeds}) == len(breeds)


def test_http_500_falls_back_to_three_random_breeds(workflow, credentials, session, png_bytes, catalog):
    session.post.return_value = make_response(status_code=500)

    outcome = workflow.run(png_bytes)

    assert outcome.state == FALLBACK
    assert len(outcome.breeds) == 3
    assert _distinct(outcome.breeds)
    assert all(b in catalog for b in outcome.breeds)
    assert isinstance(outcome.error, UnexpectedStatusError)
    assert not outcome.matched
    assert credentials.cached == "sk-test"


def test_exact_label_comes_first(workflow, session, png_bytes):
    session.post.return_value = make_response(json_data=completion("Silkie"))

    outcome = workflow.run(png_bytes)

    assert outcome.state == RESOLVED
    assert outcome.matched
    assert outcome.error is None
    assert outcome.top["name"] == "Silkie"
    assert len(outcome.breeds) == 3
    assert _distinct(outcome.breeds)


def test_padded_label_matches_like_exact(workflow, session, png_bytes):
    session.post.return_value = make_response(json_data=completion("  Silkie\n"))

    outcome = workflow.run(png_bytes)

    assert outcome.matched
    assert outcome.top["name"] == "Silkie"
    assert outcome.label == "Silkie"


def test_unknown_label_is_substituted(workflow, session, png_bytes, catalog):
    session.post.return_value = make_response(json_data=completion("Golden Silkie"))

    outcome = workflow.run(png_bytes)

    assert outcome.state == RESOLVED
    assert not outcome.matched
    assert isinstance(outcome.error, UnknownLabelError)
    assert outcome.error.label == "Golden Silkie"
    assert outcome.top in catalog
    assert len(outcome.breeds) == 3
    assert _distinct(outcome.breeds)


def test_zero_byte_image_never_reaches_the_network(workflow, session):
    outcome = workflow.run(b"")

    assert outcome.state == FALLBACK
    assert isinstance(outcome.error, ImageEncodingError)
    assert len(outcome.breeds) == 3
    session.get.assert_not_called()
    session.post.assert_not_called()


def test_outcome_carries_display_confidence(workflow, png_bytes):
    data = workflow.run(png_bytes).to_dict()
    assert [b["match_confidence"] for b in data["breeds"]] == [90, 80, 70]
    assert data["breeds"][0]["name"] == "Silkie"
    assert data["error"] is None


def test_fallback_with_small_catalog(matcher, catalog):
    client = MagicMock()
    client.identify.return_value = IdentificationResult(error=ImageEncodingError("bad"))
    outcome = IdentificationWorkflow(client, matcher, catalog[:2]).run(b"x")
    assert len(outcome.breeds) == 2
    assert _distinct(outcome.breeds)


def test_empty_catalog_is_a_configuration_error(client, matcher):
    with pytest.raises(ValueError):
        IdentificationWorkflow(client, matcher, [])
