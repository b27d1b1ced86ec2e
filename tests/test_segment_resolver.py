import pytest
import requests

from cart_offer.core.errors import SegmentLookupError
from cart_offer.services.segment_resolver import (
    HttpSegmentResolver,
    StaticSegmentResolver,
    resolve_or_none,
)


class _Resp:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=None)

    def json(self):
        if self._bad_json:
            raise ValueError("no JSON")
        return self._payload


class _Session:
    def __init__(self, resp=None, exc=None):
        self.resp = resp
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.exc:
            raise self.exc
        return self.resp


def test_http_resolver_returns_segment_and_sends_timeout():
    session = _Session(_Resp(payload={"segment": "p1"}))
    r = HttpSegmentResolver("http://segments.local/", timeout=1.5, session=session)
    assert r.resolve(1) == "p1"
    assert session.calls == [("http://segments.local/api/v1/user_segment", {"user_id": 1}, 1.5)]


@pytest.mark.parametrize(
    "session",
    [
        _Session(_Resp(status_code=404)),
        _Session(_Resp(status_code=500)),
        _Session(exc=requests.Timeout("slow")),
        _Session(exc=requests.ConnectionError("down")),
        _Session(_Resp(bad_json=True)),
        _Session(_Resp(payload={"other": "x"})),
        _Session(_Resp(payload={"segment": ""})),
        _Session(_Resp(payload=["p1"])),
    ],
)
def test_http_resolver_failures_raise_lookup_error(session):
    r = HttpSegmentResolver("http://segments.local", session=session)
    with pytest.raises(SegmentLookupError):
        r.resolve(404)


def test_static_resolver_known_and_unknown_users():
    r = StaticSegmentResolver({1: "p1"})
    assert r.resolve(1) == "p1"
    with pytest.raises(SegmentLookupError):
        r.resolve(2)


def test_resolve_or_none_degrades_failures(caplog):
    r = StaticSegmentResolver({1: "p1"})
    assert resolve_or_none(r, 1) == "p1"
    with caplog.at_level("WARNING", logger="cart_offer"):
        assert resolve_or_none(r, -1) is None
    assert "segment lookup failed" in caplog.text
