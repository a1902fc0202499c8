"""
Shared fixtures: a stub HTTP object that records calls and replays canned responses.
"""

import pytest

from pyosm.api import Api
from pyosm.auth import BasicAuth
from pyosm.config import ApiConfig
from pyosm.session import Session


class StubResponse:
    def __init__(self, status_code, body=b"", url=""):
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body
        self.text = self.content.decode("utf-8")
        self.url = url


class StubHttp:
    """Stands in for requests.Session; answers requests from a queue."""

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, status_code, body=b""):
        self.responses.append((status_code, body))
        return self

    def request(self, method, url, **kwargs):
        self.calls.append(dict(kwargs, method=method, url=url))
        if not self.responses:
            raise AssertionError("unexpected request: %s %s" % (method, url))
        status_code, body = self.responses.pop(0)
        return StubResponse(status_code, body, url)

    @property
    def call_count(self):
        return len(self.calls)


CONFIG = ApiConfig(base_url="https://api.example.org/api")
ROOT = "https://api.example.org/api/0.6"

NODE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="test">
  <node id="1234" version="3" changeset="42" user="mapper" uid="7" visible="true"
        timestamp="2012-05-01T10:00:00Z" lat="52.5" lon="13.25">
    <tag k="wheelchair" v="no"/>
  </node>
</osm>"""

USER_XML = """<osm version="0.6"><user id="7" display_name="mapper"/></osm>"""


@pytest.fixture
def http():
    return StubHttp()


@pytest.fixture
def session():
    return Session(BasicAuth("mapper", "secret"))


@pytest.fixture
def api(session, http):
    return Api(session, config=CONFIG, http=http)


@pytest.fixture
def anonymous_api(http):
    return Api(config=CONFIG, http=http)
