"""
tests/test_client_api.py -- Frontend HTTP client, with requests mocked out.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests

from shop_client.services import api


def _response(status: int, payload) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    return resp


class TestAuthCalls:
    def test_signup_success(self) -> None:
        payload = {"token": "t", "message": "User created successfully"}
        with patch.object(api.requests, "post", return_value=_response(201, payload)) as post:
            assert api.signup("ann", "ann@x.com", "secret1") == payload
        url = post.call_args.args[0]
        assert url.endswith("/api/users/signup")
        assert post.call_args.kwargs["json"] == {"username": "ann", "email": "ann@x.com", "password": "secret1"}

    def test_signup_duplicate_message(self) -> None:
        with patch.object(api.requests, "post", return_value=_response(400, {"message": "User already exists"})):
            assert api.signup("ann", "ann@x.com", "secret1") == {"error": "User already exists"}

    def test_signup_validation_uses_first_field_error(self) -> None:
        body = {
            "message": "Validation failed",
            "errors": [{"field": "password", "message": "Password must be 6+ characters"}],
        }
        with patch.object(api.requests, "post", return_value=_response(400, body)):
            assert api.signup("ann", "ann@x.com", "1") == {"error": "Password must be 6+ characters"}

    def test_signin_success(self) -> None:
        payload = {"token": "t", "user": {"id": "1", "username": "ann", "email": "ann@x.com"}}
        with patch.object(api.requests, "post", return_value=_response(200, payload)):
            assert api.signin("ann@x.com", "secret1") == payload

    def test_signin_unreadable_error_body(self) -> None:
        resp = _response(500, None)
        resp.json.side_effect = ValueError("no json")
        with patch.object(api.requests, "post", return_value=resp):
            assert api.signin("ann@x.com", "secret1") == {"error": "Error signing in"}

    def test_network_failure(self) -> None:
        with patch.object(api.requests, "post", side_effect=requests.ConnectionError("refused")):
            assert "error" in api.signin("ann@x.com", "secret1")


class TestProductCalls:
    def test_fetch_sends_bearer_token(self) -> None:
        with patch.object(api.requests, "get", return_value=_response(200, [])) as get:
            assert api.fetch_products("tok") == []
        assert get.call_args.kwargs["headers"] == {"Authorization": "Bearer tok"}

    def test_fetch_without_token_sends_no_header(self) -> None:
        with patch.object(api.requests, "get", return_value=_response(200, [])) as get:
            api.fetch_products(None)
        assert get.call_args.kwargs["headers"] == {}

    def test_fetch_failure(self) -> None:
        with patch.object(api.requests, "get", return_value=_response(401, {"message": "No token provided"})):
            assert api.fetch_products(None) == {"error": "No token provided"}

    def test_create_maps_image_url(self) -> None:
        created = {"message": "Product added successfully", "product": {"id": "1"}}
        with patch.object(api.requests, "post", return_value=_response(201, created)) as post:
            assert api.create_product("tok", "Lamp", 9.5, "A bright desk lamp", "http://img", 3) == created
        assert post.call_args.kwargs["json"]["imageUrl"] == "http://img"

    def test_get_me(self) -> None:
        me = {"id": "1", "username": "ann", "email": "ann@x.com"}
        with patch.object(api.requests, "get", return_value=_response(200, me)):
            assert api.get_me("tok") == me
        with patch.object(api.requests, "get", return_value=_response(403, {"message": "Invalid token"})):
            assert api.get_me("bad") is None
