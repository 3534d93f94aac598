import json
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
import requests

from art_of_the_day.models import ArtworkRecord, HslColor, ImageRecord


def _response(
    status: int = 200,
    payload: Any = None,
    *,
    body: bytes | None = None,
    url: str = "https://api.artic.edu/api/v1/artworks/1",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.url = url
    response.encoding = "utf-8"
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return _response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def artwork_item() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        item = {
            "id": 16568,
            "image_id": "3c27b499-af56-f0d5-93b5-a7f2f1ad5813",
            "title": "Water Lilies",
            "artist_display": "Claude Monet\nFrench, 1840-1926",
            "medium_display": "Oil on canvas",
            "place_of_origin": "France",
            "style_title": "Impressionism",
            "color": {"h": 200, "l": 51, "s": 36, "percentage": 0.1, "population": 1000},
            "has_not_been_viewed_much": True,
            "is_public_domain": True,
        }
        item.update(overrides)
        return item

    return _make


@pytest.fixture
def image_payload() -> dict[str, Any]:
    return {
        "data": {
            "alt_text": "Painting of pink water lilies.",
            "credit_line": "Mr. and Mrs. Martin A. Ryerson Collection",
            "iiif_url": "https://www.artic.edu/iiif/2/3c27b499-af56-f0d5-93b5-a7f2f1ad5813",
            "width": 3000,
        },
        "info": {
            "license_text": "The `description` field is licensed under CC-BY 4.0.",
            "license_links": [
                "https://creativecommons.org/publicdomain/zero/1.0/",
                "https://www.artic.edu/terms",
            ],
        },
        "config": {"iiif_url": "https://www.artic.edu/iiif/2"},
    }


@pytest.fixture
def artwork() -> ArtworkRecord:
    return ArtworkRecord(
        id=16568,
        image_id="abc",
        viewed_rarely=True,
        is_public_domain=True,
        title="Water Lilies",
        artist="Claude Monet",
        color=HslColor(h=200, s=36, l=51),
    )


@pytest.fixture
def image() -> ImageRecord:
    return ImageRecord(
        image_id="abc",
        base_url="https://www.artic.edu/iiif/2",
        path="/abc",
        width=3000,
        alt_text="Painting of pink water lilies.",
    )
