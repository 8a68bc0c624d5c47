"""
Unit tests for Endpoint URL building.
"""

from dataclasses import FrozenInstanceError

import pytest

from apiwire.models import Endpoint, HTTPScheme


@pytest.mark.unit
class TestEndpoint:
    def test_name_defaults_to_host(self):
        assert Endpoint(host="api.example.com").name == "api.example.com"

    def test_empty_host_rejected(self):
        with pytest.raises(ValueError):
            Endpoint(host="")

    def test_immutable(self):
        endpoint = Endpoint(host="api.example.com")
        with pytest.raises(FrozenInstanceError):
            endpoint.host = "other.example.com"

    def test_url_without_path(self):
        assert Endpoint(host="api.example.com").url() == "https://api.example.com"

    @pytest.mark.parametrize("base_path", ["v1", "/v1", "/v1/", "v1/"])
    def test_base_path_normalized(self, base_path):
        endpoint = Endpoint(host="api.example.com", base_path=base_path)
        assert endpoint.url(path=["users"]) == "https://api.example.com/v1/users"

    def test_path_components_are_escaped_individually(self):
        endpoint = Endpoint(host="api.example.com")
        url = endpoint.url(HTTPScheme.HTTP, path=["files", "a/b", 3])
        assert url == "http://api.example.com/files/a%2Fb/3"

    def test_query(self):
        endpoint = Endpoint(host="api.example.com")
        url = endpoint.url(path=["search"], query={"q": "x y", "n": 5})
        assert url == "https://api.example.com/search?q=x+y&n=5"
