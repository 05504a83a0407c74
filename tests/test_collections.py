"""Tests for mlclient.collections — DictObject, HttpHeaders and ValuesResult."""
from __future__ import annotations

import pytest

from mlclient.collections import DictObject, HttpHeaders, ValuesResult


# ── DictObject ─────────────────────────────────────────────────────────

class TestDictObject:
    """Tests for DictObject attribute-style dict access."""

    def test_init_kwargs(self):
        obj = DictObject(a=1, b=2)
        assert obj["a"] == 1
        assert obj.b == 2

    def test_init_pairs(self):
        obj = DictObject([("k1", "v1"), ("k2", "v2")])
        assert obj.k1 == "v1"
        assert obj["k2"] == "v2"

    def test_set_via_attr(self):
        obj = DictObject()
        obj.key = "val"
        assert obj["key"] == "val"

    def test_delete_via_attr(self):
        obj = DictObject(a=1)
        del obj.a
        assert "a" not in obj

    def test_non_identifier_keys(self):
        obj = DictObject([("role-name", "admin")])
        assert obj["role-name"] == "admin"

    def test_dict_identity(self):
        obj = DictObject(a=1)
        assert obj.__dict__ is obj


# ── HttpHeaders ────────────────────────────────────────────────────────

class TestHttpHeaders:
    def test_from_mapping(self):
        headers = HttpHeaders({"Content-Type": "text/plain", "ETag": "1"})
        assert headers.get_header("Content-Type") == "text/plain"
        assert headers.get_header("ETag") == "1"

    def test_from_pairs_last_write_wins(self):
        headers = HttpHeaders([("X-A", "1"), ("X-B", "2"), ("X-A", "3")])
        assert headers.get_header("X-A") == "3"
        assert headers.get_headers() == [("X-A", "3"), ("X-B", "2")]

    def test_case_sensitive(self):
        headers = HttpHeaders({"Content-type": "application/json"})
        assert headers.get_header("Content-Type") == ""
        assert headers.get_header("Content-type") == "application/json"

    def test_both_spellings_are_kept(self):
        headers = HttpHeaders([("Content-type", "a/b"), ("Content-Type", "c/d")])
        assert len(headers) == 2

    def test_missing_default(self):
        assert HttpHeaders().get_header("X-Missing", "none") == "none"

    def test_set_header(self):
        headers = HttpHeaders()
        headers.set_header("Accept", "application/xml")
        assert headers["Accept"] == "application/xml"

    def test_copy_is_independent(self):
        headers = HttpHeaders({"A": "1"})
        copied = headers.copy()
        copied.set_header("A", "2")
        assert isinstance(copied, HttpHeaders)
        assert headers.get_header("A") == "1"


# ── ValuesResult ───────────────────────────────────────────────────────

class TestValuesResult:
    def test_add_creates_list(self):
        vr = ValuesResult()
        vr.add("sum", 1.0)
        assert vr["sum"] == [1.0]

    def test_add_appends(self):
        vr = ValuesResult()
        vr.add("sum", 1.0)
        vr.add("sum", 2.0)
        assert vr["sum"] == [1.0, 2.0]
        assert vr.get_value("sum") == 1.0

    def test_assigning_new_name(self):
        vr = ValuesResult()
        vr["avg"] = [3.0]
        assert vr.get_value("avg") == 3.0

    def test_existing_name_not_overwritten(self):
        vr = ValuesResult()
        vr.add("sum", 1.0)
        with pytest.raises(KeyError):
            vr["sum"] = [5.0]
        assert vr["sum"] == [1.0]

    def test_get_value_missing(self):
        with pytest.raises(KeyError):
            ValuesResult().get_value("nope")

    def test_names_in_order(self):
        vr = ValuesResult()
        vr.add("b", 1)
        vr.add("a", 2)
        assert vr.names() == ["b", "a"]
