import requests
from unittest.mock import patch

from embed_search.resolve import resolve


def test_returns_final_url_after_redirects(make_response):
    final = "https://www.tiktok.com/@a/video/123"
    with patch("embed_search.client.SESSION") as session:
        session.get.return_value = make_response(url=final)
        assert resolve("https://vm.tiktok.com/ZMabc/") == final
    args, kwargs = session.get.call_args
    assert args[0] == "https://vm.tiktok.com/ZMabc/"
    assert kwargs["allow_redirects"] is True


def test_network_failure_falls_back_to_input():
    with patch("embed_search.client.SESSION") as session:
        session.get.side_effect = requests.Timeout("slow")
        assert resolve("https://vm.tiktok.com/ZMabc/") == "https://vm.tiktok.com/ZMabc/"


def test_malformed_url_falls_back_to_input():
    # real session: requests rejects the URL before any I/O
    assert resolve("not-a-url") == "not-a-url"


def test_empty_final_url_falls_back_to_input(make_response):
    with patch("embed_search.client.SESSION") as session:
        session.get.return_value = make_response(url="")
        assert resolve("https://vm.tiktok.com/x/") == "https://vm.tiktok.com/x/"
