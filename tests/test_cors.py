import pytest
from starlette.responses import Response

from msgboard.core.cors import CORS_HEADERS, apply_cors_headers


def assert_cors(response):
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert response.headers["access-control-max-age"] == "86400"


def test_apply_cors_headers_sets_all_four():
    response = apply_cors_headers(Response(status_code=204))
    assert_cors(response)
    assert len(CORS_HEADERS) == 4


def test_apply_cors_headers_overwrites_existing_value():
    response = Response(headers={"Access-Control-Allow-Origin": "https://example.com"})
    apply_cors_headers(response)
    assert response.headers.getlist("access-control-allow-origin") == ["*"]


@pytest.mark.parametrize("path", ["/msg", "/list", "/", "/nowhere/at/all"])
def test_options_any_path_is_bare_200(client, path):
    response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)


@pytest.mark.parametrize(
    "method, path, expected",
    [
        ("GET", "/msg", 405),
        ("POST", "/list", 405),
        ("GET", "/list", 400),
        ("POST", "/msg", 400),
        ("GET", "/unknown", 404),
        ("GET", "/list?cate=general", 200),
    ],
)
def test_every_response_carries_cors(client, method, path, expected):
    response = client.request(method, path)
    assert response.status_code == expected
    assert_cors(response)
