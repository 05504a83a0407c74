"""Tests for mlclient.content — text and binary document content."""
from __future__ import annotations

import copy

import pytest

from mlclient.content import (
    BinaryEncoding,
    ContentKind,
    DocumentContent,
    GenericBinaryDocumentContent,
    GenericTextDocumentContent,
    document_text,
)
from mlclient.exceptions import InvalidFormatError
from mlclient.mime import MIME_BINARY, MIME_JSON, MIME_XML


# ── DocumentContent ────────────────────────────────────────────────────

class TestDocumentContent:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            DocumentContent()

    def test_mime_constants(self):
        assert DocumentContent.MIME_JSON == "application/json"
        assert DocumentContent.MIME_XML == "application/xml"


# ── GenericTextDocumentContent ─────────────────────────────────────────

class TestGenericTextDocumentContent:
    def test_defaults(self):
        doc = GenericTextDocumentContent()
        assert doc.get_content() == ""
        assert doc.get_mime_type() == MIME_JSON
        assert doc.kind is ContentKind.TEXT

    def test_set_get_content_is_identity(self):
        doc = GenericTextDocumentContent()
        text = '  {"a" : 1}\n'
        doc.set_content(text)
        assert doc.get_content() == text
        doc.set_content(doc.get_content())
        assert doc.get_content() == text

    def test_length_is_character_count(self):
        doc = GenericTextDocumentContent("héllo wörld")
        assert doc.get_length() == 11
        assert len(doc.get_content().encode("utf-8")) == 13

    def test_empty_length(self):
        assert GenericTextDocumentContent().get_length() == 0

    def test_set_content_rejects_bytes(self):
        with pytest.raises(TypeError):
            GenericTextDocumentContent().set_content(b"bytes")

    def test_mime_type_without_charset(self):
        doc = GenericTextDocumentContent()
        doc.set_mime_type("application/xml; charset=utf-8")
        assert doc.get_mime_type() == MIME_XML

    def test_stream(self):
        doc = GenericTextDocumentContent("Some very nice text document", "text/plain")
        stream = doc.get_stream()
        assert stream.read() == "Some very nice text document"

    def test_stream_is_fresh(self):
        doc = GenericTextDocumentContent("abc")
        doc.get_stream().read()
        assert doc.get_stream().read() == "abc"

    def test_copy_is_independent(self):
        doc = GenericTextDocumentContent('{"a":1}', MIME_JSON)
        copied = copy.copy(doc)
        copied.set_content('{"b":2}')
        copied.set_mime_type(MIME_XML)
        assert doc.get_content() == '{"a":1}'
        assert doc.get_mime_type() == MIME_JSON

    def test_from_document(self):
        doc = GenericTextDocumentContent("<doc/>", MIME_XML)
        copied = GenericTextDocumentContent.from_document(doc)
        assert copied == doc
        assert copied is not doc

    def test_equality(self):
        assert GenericTextDocumentContent("a", MIME_JSON) == GenericTextDocumentContent("a", MIME_JSON)
        assert GenericTextDocumentContent("a", MIME_JSON) != GenericTextDocumentContent("a", MIME_XML)
        assert GenericTextDocumentContent("a") != "a"


# ── GenericBinaryDocumentContent ───────────────────────────────────────

class TestGenericBinaryDocumentContent:
    def test_defaults(self):
        doc = GenericBinaryDocumentContent()
        assert doc.get_bytes() == b""
        assert doc.get_mime_type() == MIME_BINARY
        assert doc.kind is ContentKind.BINARY

    def test_copies_mutable_buffer(self):
        buf = bytearray(b"\x89PNG")
        doc = GenericBinaryDocumentContent(buf, "image/png")
        buf[0] = 0
        assert doc.get_bytes() == b"\x89PNG"

    def test_hex_content(self):
        doc = GenericBinaryDocumentContent(b"\x00\xff\x10")
        assert doc.get_content() == "00ff10"
        assert doc.get_content(BinaryEncoding.HEX) == "00ff10"
        assert doc.get_length() == 6

    def test_bin_content(self):
        doc = GenericBinaryDocumentContent(b"\x00\xff")
        assert doc.get_content(BinaryEncoding.BIN) == "\x00\xff"

    def test_set_content_hex(self):
        doc = GenericBinaryDocumentContent()
        doc.set_content("cafe")
        assert doc.get_bytes() == b"\xca\xfe"

    def test_set_content_bin(self):
        doc = GenericBinaryDocumentContent()
        doc.set_content("\x01\x02", BinaryEncoding.BIN)
        assert doc.get_bytes() == b"\x01\x02"

    def test_set_content_invalid_hex(self):
        with pytest.raises(InvalidFormatError):
            GenericBinaryDocumentContent().set_content("xyz")

    def test_stream(self):
        assert GenericBinaryDocumentContent(b"abc").get_stream().read() == b"abc"

    def test_not_equal_to_text(self):
        assert GenericBinaryDocumentContent(b"a") != GenericTextDocumentContent("a")


# ── document_text ──────────────────────────────────────────────────────

class TestDocumentText:
    def test_text(self):
        assert document_text(GenericTextDocumentContent("abc")) == "abc"

    def test_binary_utf8(self):
        assert document_text(GenericBinaryDocumentContent("é".encode("utf-8"))) == "é"

    def test_binary_not_utf8(self):
        with pytest.raises(InvalidFormatError):
            document_text(GenericBinaryDocumentContent(b"\xff\xfe\xfa"))
