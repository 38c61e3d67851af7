"""Test helpers: a fake HTTP transport and canned API payloads."""

import threading
from urllib.parse import urlparse

import requests

USER_ID = "65f1a2b3c4d5e6f7a8b9c0d1"
TOKEN = "test-token"

_NO_BODY = object()


class FakeResponse:
    def __init__(self, status_code=200, body=_NO_BODY):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is _NO_BODY:
            raise ValueError("No JSON body")
        return self._body


class FakeHttp:
    """Stands in for the ``requests`` module: records calls, replays responses.

    Routes are keyed by (METHOD, path). A route can map to a FakeResponse or
    to an exception instance, which is raised instead.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self._lock = threading.Lock()

    def request(self, method, url, headers=None, json=None, params=None, timeout=None):
        path = urlparse(url).path
        with self._lock:
            self.calls.append({
                "method": method,
                "url": url,
                "path": path,
                "headers": headers or {},
                "json": json,
                "params": params,
                "timeout": timeout,
            })
        outcome = self.routes.get((method, path))
        if outcome is None:
            raise requests.ConnectionError(f"No route for {method} {path}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def paths(self):
        return [(call["method"], call["path"]) for call in self.calls]


def category_payload(category_id, name, budget):
    return {"_id": category_id, "name": name, "budget": budget}


def transaction_payload(tx_id, amount, tx_type, date, category=None, description=""):
    payload = {"_id": tx_id, "amount": amount, "type": tx_type, "date": date, "description": description}
    if category is not None:
        payload["category"] = category
    return payload


class FakeCookies:
    """Browser cookie jar with the CookieManager get/set/delete surface."""

    def __init__(self, cookies=None):
        self.cookies = dict(cookies or {})
        self.component_keys = []

    def get(self, cookie):
        return self.cookies.get(cookie)

    def set(self, cookie, val, expires_at=None, key="set"):
        self.component_keys.append(key)
        self.cookies[cookie] = val

    def delete(self, cookie, key="delete"):
        self.component_keys.append(key)
        del self.cookies[cookie]
