from __future__ import annotations

import pytest
import requests

SAMPLE_HTML = """
<html>
  <head>
    <title>Example Store</title>
    <meta name="description" content="Handmade mugs and cups.">
  </head>
  <body>
    <h1>Welcome</h1>
    <h2>Mugs</h2>
    <h2>Cups</h2>
    <h3>About us</h3>
    <p>Browse our collection of handmade mugs and add your favourites to the cart before they sell out.</p>
    <a href="/mugs">Mugs</a>
    <a href="/cups">Cups</a>
    <a name="anchor">no href</a>
    <img src="/mug.png">
    <img alt="missing src">
  </body>
</html>
"""


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code
        self.closed = False

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def stub_get(monkeypatch):
    """Replace requests.get; returns the list of recorded calls."""

    def install(html: str = SAMPLE_HTML, status: int = 200, exc: Exception | None = None):
        calls = []

        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            if exc is not None:
                raise exc
            return FakeResponse(html, status)

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return install
