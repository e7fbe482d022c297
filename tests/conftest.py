import random
from unittest.mock import MagicMock

import cv2
import numpy as np
import pytest

from breed_data import builtin_breeds
from credentials import CredentialProvider
from matcher import CatalogMatcher
from openai_api import BreedIdentificationClient


def make_response(status_code=200, json_data=None, json_error=None, text=""):
    """Stand-in for a requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def catalog():
    return builtin_breeds()


@pytest.fixture
def png_bytes():
    img = np.full((32, 32, 3), 128, dtype=np.uint8)
    cv2.rectangle(img, (4, 4), (20, 20), (0, 0, 255), -1)
    ok, buf = cv2.imencode(".png", img)
    assert ok
    return buf.tobytes()


@pytest.fixture
def session():
    """A requests.Session double whose GET serves a valid credential document."""
    s = MagicMock()
    s.get.return_value = make_response(json_data={"apiKey": "sk-test"})
    s.post.return_value = make_response(json_data=completion("Silkie"))
    return s


@pytest.fixture
def credentials(session):
    return CredentialProvider(url="https://config.example.com/key.json", session=session, timeout=5)


@pytest.fixture
def client(credentials, session):
    return BreedIdentificationClient(credentials, session=session, timeout=5)


@pytest.fixture
def matcher():
    return CatalogMatcher(random.Random(1234))
