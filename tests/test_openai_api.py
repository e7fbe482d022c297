import base64
from unittest.mock import MagicMock

import pytest
import requests

from breed_data import breed_names
from conftest import completion, make_response
from credentials import CredentialProvider
from errors import (
    CredentialFetchError,
    DecodeError,
    ImageEncodingError,
    TransportError,
    UnexpectedStatusError,
)
from image_encoding import from_data_uri
from openai_api import BreedIdentificationClient, build_system_prompt, parse_completion


def _posted_body(session):
    return session.post.call_args.kwargs["json"]


def test_identify_returns_model_label(client, session, png_bytes):
    result = client.identify(png_bytes)
    assert result.ok
    assert result.breed_name == "Silkie"
    assert result.error is None


def test_request_shape(client, session, png_bytes):
    client.identify(png_bytes)

    args, kwargs = session.post.call_args
    assert args[0] == "https://api.openai.com/v1/chat/completions"
    assert kwargs["timeout"] == 5
    assert kwargs["headers"] == {
        "Content-Type": "application/json",
        "Authorization": "Bearer sk-test",
    }

    body = kwargs["json"]
    assert body["model"] == "gpt-4o-mini"
    assert body["max_tokens"] == 50
    assert body["temperature"] == 0.3

    system, user = body["messages"]
    assert system["role"] == "system"
    assert ", ".join(breed_names()) in system["content"]
    assert user["role"] == "user"
    assert user["content"][0]["type"] == "text"
    assert user["content"][1]["type"] == "image_url"
    assert user["content"][1]["image_url"]["url"].startswith("data:image/jpeg;base64,")


def test_embedded_image_decodes_to_jpeg(client, session, png_bytes):
    client.identify(png_bytes)
    url = _posted_body(session)["messages"][1]["content"][1]["image_url"]["url"]
    jpeg = from_data_uri(url)
    assert jpeg[:2] == b"\xff\xd8"
    assert base64.b64encode(jpeg).decode("ascii") == url.split(",", 1)[1]


def test_system_prompt_keeps_catalog_order():
    prompt = build_system_prompt(["Sussex", "Silkie", "Leghorn"])
    assert "Sussex, Silkie, Leghorn" in prompt


@pytest.mark.parametrize("content", ["  Silkie\n", "\nSilkie", "Silkie\r\n"])
def test_label_is_trimmed(client, session, png_bytes, content):
    session.post.return_value = make_response(json_data=completion(content))
    assert client.identify(png_bytes).breed_name == "Silkie"


def test_non_200_status(client, session, png_bytes):
    session.post.return_value = make_response(status_code=500, text="boom")
    result = client.identify(png_bytes)
    assert not result.ok
    assert isinstance(result.error, UnexpectedStatusError)
    assert result.error.status_code == 500


@pytest.mark.parametrize("exc", [
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.ConnectionError("reset"),
])
def test_transport_failures(client, session, png_bytes, exc):
    session.post.side_effect = exc
    result = client.identify(png_bytes)
    assert isinstance(result.error, TransportError)


@pytest.mark.parametrize("response", [
    make_response(json_error=ValueError("Expecting value")),
    make_response(json_data={"choices": []}),
    make_response(json_data={"error": {"message": "nope"}}),
    make_response(json_data={"choices": [{"message": {"content": None}}]}),
])
def test_undecodable_bodies(client, session, png_bytes, response):
    session.post.return_value = response
    result = client.identify(png_bytes)
    assert isinstance(result.error, DecodeError)


def test_encoding_failure_skips_network(client, session):
    result = client.identify(b"")
    assert isinstance(result.error, ImageEncodingError)
    session.get.assert_not_called()
    session.post.assert_not_called()


def test_credential_failure_skips_classification(png_bytes):
    session = MagicMock()
    session.get.side_effect = requests.exceptions.ConnectionError("offline")
    client = BreedIdentificationClient(
        CredentialProvider(url="https://config.example.com/key.json", session=session),
        session=session,
    )
    result = client.identify(png_bytes)
    assert isinstance(result.error, CredentialFetchError)
    session.post.assert_not_called()


def test_parse_completion_uses_first_choice():
    data = {"choices": [{"message": {"content": "Brahma"}}, {"message": {"content": "Cochin"}}]}
    assert parse_completion(data) == "Brahma"
