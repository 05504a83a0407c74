"""Tests for mlclient.json_helper — JsonHelper conversions and permissions."""
from __future__ import annotations

import json

import pytest

from mlclient.collections import DictObject
from mlclient.content import GenericBinaryDocumentContent, GenericTextDocumentContent
from mlclient.exceptions import InvalidFormatError
from mlclient.json_helper import JsonHelper
from mlclient.mime import MIME_JSON, MIME_XML
from mlclient.models import Capability, Permission, PermissionSet
from mlclient.response import Response


# ── helpers ────────────────────────────────────────────────────────────

def _response(content, content_type='application/json', status=200):
    resp = Response()
    resp.set_response_code(status)
    resp.set_response_headers({'Content-Type': content_type})
    resp.set_content(content)
    return resp


METADATA = {
    'collections': [],
    'permissions': [
        {'role-name': 'rest-reader', 'capabilities': ['read']},
        {'role-name': 'rest-writer', 'capabilities': ['update', 'insert']},
    ],
    'properties': {},
    'quality': 0,
}


# ── JsonHelper ─────────────────────────────────────────────────────────

class TestJsonHelper:
    def test_not_instantiable(self):
        with pytest.raises(TypeError):
            JsonHelper()


class TestFromString:
    def test_objects_are_dict_objects(self):
        value = JsonHelper.from_string('{"a": {"b": 1}}')
        assert isinstance(value, DictObject)
        assert value.a.b == 1

    def test_invalid(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_string('{"a": ')


class TestToDocument:
    def test_from_value(self):
        doc = JsonHelper.to_document({'a': 1})
        assert isinstance(doc, GenericTextDocumentContent)
        assert doc.get_mime_type() == MIME_JSON
        assert json.loads(doc.get_content()) == {'a': 1}

    def test_unicode_kept(self):
        doc = JsonHelper.to_document({'name': 'José'})
        assert 'José' in doc.get_content()

    def test_not_serializable(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.to_document({'a': object()})

    def test_from_response(self):
        doc = JsonHelper.to_document(_response(b'{"first":"value1"}'))
        assert doc.get_mime_type() == MIME_JSON
        assert json.loads(doc.get_content()) == {'first': 'value1'}

    def test_from_response_ignores_classification(self):
        doc = JsonHelper.to_document(_response('[1, 2]', content_type='text/plain'))
        assert json.loads(doc.get_content()) == [1, 2]

    def test_from_response_invalid(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.to_document(_response('not json'))


class TestFromDocument:
    def test_round_trip(self):
        doc = GenericTextDocumentContent('{"a":1}', MIME_JSON)
        value = JsonHelper.from_document(doc)
        back = JsonHelper.from_document(JsonHelper.to_document(value))
        assert back == {'a': 1}

    def test_round_trip_key_order_irrelevant(self):
        doc = GenericTextDocumentContent('{"b": [1, 2], "a": {"c": null}}')
        back = JsonHelper.from_document(JsonHelper.to_document(JsonHelper.from_document(doc)))
        assert back == {'a': {'c': None}, 'b': [1, 2]}

    def test_wrong_mime_type_still_parsed(self):
        doc = GenericTextDocumentContent('{"a":1}', 'text/plain')
        assert JsonHelper.from_document(doc) == {'a': 1}

    def test_wrong_mime_type_checked(self):
        doc = GenericTextDocumentContent('{"a":1}', MIME_XML)
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_document(doc, check_mime_type=True)

    def test_right_mime_type_checked(self):
        doc = GenericTextDocumentContent('{"a":1}', 'text/json')
        assert JsonHelper.from_document(doc, check_mime_type=True) == {'a': 1}

    def test_parse_failure(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_document(GenericTextDocumentContent('<doc/>', MIME_JSON))

    def test_binary_document(self):
        doc = GenericBinaryDocumentContent(b'{"a": 1}', MIME_JSON)
        assert JsonHelper.from_document(doc) == {'a': 1}


class TestFromResponse:
    def test_json_response(self):
        assert JsonHelper.from_response(_response(b'{"a": [1]}')).a == [1]

    def test_charset_in_content_type(self):
        resp = _response(b'{"a": 1}', content_type='application/json; charset=utf-8')
        assert JsonHelper.from_response(resp) == {'a': 1}

    @pytest.mark.parametrize("content_type", ['application/xml', 'text/plain', 'image/png'])
    def test_wrong_type(self, content_type):
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_response(_response(b'{"a": 1}', content_type=content_type))

    def test_unclassified(self):
        resp = Response()
        resp.set_content('{"a": 1}')
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_response(resp)

    def test_invalid_body(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.from_response(_response(b'{oops'))


# ── JsonHelper.permissions_from_response ───────────────────────────────

class TestPermissionsFromResponse:
    def test_metadata_object(self):
        permissions = JsonHelper.permissions_from_response(_response(json.dumps(METADATA)))
        assert isinstance(permissions, PermissionSet)
        assert permissions == [
            Permission('rest-reader', Capability.READ),
            Permission('rest-writer', Capability.UPDATE),
            Permission('rest-writer', Capability.INSERT),
        ]

    def test_bare_list(self):
        body = [{'role-name': 'admin', 'capabilities': ['node-update', 'execute']}]
        permissions = JsonHelper.permissions_from_response(_response(json.dumps(body)))
        assert permissions.roles() == ['admin']
        assert permissions.capabilities_for('admin') == [Capability.NODE_UPDATE, Capability.EXECUTE]

    def test_empty(self):
        permissions = JsonHelper.permissions_from_response(_response('{"permissions": []}'))
        assert permissions == []

    def test_no_permissions_key(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.permissions_from_response(_response('{"collections": []}'))

    @pytest.mark.parametrize("body", [
        '{"permissions": {"role-name": "a"}}',
        '{"permissions": ["read"]}',
        '{"permissions": [{"capabilities": ["read"]}]}',
        '{"permissions": [{"role-name": "a", "capabilities": "read"}]}',
        '"permissions"',
    ])
    def test_shape_mismatch(self, body):
        with pytest.raises(InvalidFormatError):
            JsonHelper.permissions_from_response(_response(body))

    def test_unknown_capability(self):
        body = '{"permissions": [{"role-name": "a", "capabilities": ["fly"]}]}'
        with pytest.raises(InvalidFormatError):
            JsonHelper.permissions_from_response(_response(body))

    def test_not_json_response(self):
        with pytest.raises(InvalidFormatError):
            JsonHelper.permissions_from_response(_response(json.dumps(METADATA), content_type='application/xml'))


class TestPermissionsWithDictMethodKeys:
    def test_entry_with_get_key(self):
        body = {'permissions': [{'role-name': 'rest-reader', 'capabilities': ['read'], 'get': 1}]}
        permissions = JsonHelper.permissions_from_response(_response(json.dumps(body)))
        assert permissions == [Permission('rest-reader', Capability.READ)]

    def test_metadata_with_items_key(self):
        body = {'items': 0, 'permissions': [{'role-name': 'admin', 'capabilities': ['execute']}]}
        permissions = JsonHelper.permissions_from_response(_response(json.dumps(body)))
        assert permissions.roles() == ['admin']
