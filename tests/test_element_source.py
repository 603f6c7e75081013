# ==============================================
# Tests for ElementSource
# ==============================================

import json

import pytest
import requests

from nuclide_explorer.config import SourceConfig
from nuclide_explorer.sources import DataSourceError, ElementSource


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self._invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def source():
    return ElementSource(url="http://example.test/elements", timeout=5.0)


class TestFetch:
    def test_list_payload(self, source, monkeypatch, sample_elements):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(sample_elements)

        monkeypatch.setattr(requests, "get", fake_get)
        assert source.fetch() == sample_elements
        assert calls == [("http://example.test/elements", 5.0)]

    @pytest.mark.parametrize("key", ["elements", "data"])
    def test_wrapped_payload(self, source, monkeypatch, sample_elements, key):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({key: sample_elements}))
        assert source.fetch() == sample_elements

    def test_http_error(self, source, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(status_code=503))
        with pytest.raises(DataSourceError):
            source.fetch()

    def test_connection_error(self, source, monkeypatch):
        def fake_get(url, timeout):
            raise requests.exceptions.ConnectionError("refused")

        monkeypatch.setattr(requests, "get", fake_get)
        with pytest.raises(DataSourceError):
            source.fetch()

    def test_invalid_json(self, source, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(invalid_json=True))
        with pytest.raises(DataSourceError):
            source.fetch()

    def test_unexpected_shape(self, source, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({"count": 3}))
        with pytest.raises(DataSourceError):
            source.fetch()

    def test_no_url(self):
        with pytest.raises(DataSourceError):
            ElementSource(url=None).fetch()

    def test_from_config(self):
        source = ElementSource.from_config(SourceConfig(elements_url="http://x.test/e", request_timeout=2.5))
        assert source.url == "http://x.test/e"
        assert source.timeout == 2.5


class TestLoad:
    def test_load_file(self, tmp_path, sample_elements):
        path = tmp_path / "elements.json"
        path.write_text(json.dumps(sample_elements), encoding="utf-8")
        assert ElementSource().load(path) == sample_elements

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "elements.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataSourceError):
            ElementSource().load(path)

    def test_load_not_utf8(self, tmp_path):
        path = tmp_path / "elements.json"
        path.write_bytes(b'[{"symbol": "\xff\xfe"}]')
        with pytest.raises(DataSourceError):
            ElementSource().load(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ElementSource().load(tmp_path / "missing.json")
