# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2026 Dubalu LLC. All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
#
"""Conversions between JSON values, document content and responses.

Parsed JSON objects are ``DictObject`` instances, so fields can be read as
attributes.

Example:
    >>> doc = JsonHelper.to_document({'first': 'value1'})
    >>> doc.get_mime_type()
    'application/json'
    >>> JsonHelper.from_document(doc).first
    'value1'
"""
from __future__ import annotations

import json
import logging
from typing import Any

from .collections import DictObject
from .content import DocumentContent, GenericTextDocumentContent, document_text
from .exceptions import InvalidFormatError
from .log import timed
from .mime import MIME_JSON, ResponseType, classify
from .models import Capability, Permission, PermissionSet
from .response import Response


logger = logging.getLogger('mlclient')

PERMISSIONS = 'permissions'
ROLE_NAME = 'role-name'
CAPABILITIES = 'capabilities'


class JsonHelper:
    """Static functions converting JSON between its representations.

    Not meant to be instantiated.
    """

    def __init__(self):
        raise TypeError("JsonHelper only provides static methods")

    @staticmethod
    def from_string(text: str) -> Any:
        """Parse a JSON string.

        Raises:
            InvalidFormatError: If ``text`` is not valid JSON.
        """
        try:
            return json.loads(text, object_pairs_hook=DictObject)
        except (TypeError, ValueError) as exc:
            logger.debug(f"@@@>> INVALID JSON: {exc} :: {text!r:.200}")
            raise InvalidFormatError(f"Invalid JSON: {exc}") from exc

    @staticmethod
    @timed
    def to_document(value: Any) -> GenericTextDocumentContent:
        """Wrap a JSON value, or the JSON body of a response, as text content.

        Args:
            value: A JSON-serializable value, or a ``Response`` whose body
                is parsed as JSON whatever its classified type.

        Returns:
            GenericTextDocumentContent: The serialized value tagged
                ``application/json``.

        Raises:
            InvalidFormatError: If a response body is not valid JSON, or
                the value cannot be serialized.
        """
        if isinstance(value, Response):
            value = JsonHelper.from_string(value.get_text())
        try:
            text = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise InvalidFormatError(f"Value is not JSON serializable: {exc}") from exc
        return GenericTextDocumentContent(text, MIME_JSON)

    @staticmethod
    @timed
    def from_document(doc: DocumentContent, check_mime_type: bool = False) -> Any:
        """Parse the content of a document as JSON.

        Parsing is attempted whatever the document's MIME type, unless
        ``check_mime_type`` is set.

        Args:
            doc: Any document content; binary content is read as UTF-8.
            check_mime_type: Refuse documents whose MIME type does not
                classify as JSON.

        Raises:
            InvalidFormatError: If the content is not valid JSON, or its
                MIME type is refused.
        """
        if check_mime_type and classify(doc.get_mime_type()) is not ResponseType.JSON:
            raise InvalidFormatError(f"Document MIME type {doc.get_mime_type()!r} is not JSON")
        return JsonHelper.from_string(document_text(doc))

    @staticmethod
    @timed
    def from_response(response: Response) -> Any:
        """Parse the body of a response classified as JSON.

        Raises:
            InvalidFormatError: If the response is not classified
                ``ResponseType.JSON``, or its body is not valid JSON.
        """
        if response.get_response_type() is not ResponseType.JSON:
            raise InvalidFormatError(f"Response is {response.get_response_type()}, not JSON")
        return JsonHelper.from_string(response.get_text())

    @staticmethod
    @timed
    def permissions_from_response(response: Response) -> PermissionSet:
        """Extract the permissions from a document metadata response.

        Accepts either the metadata object, whose ``permissions`` key holds
        the entries, or the bare list of entries. Each entry has the shape
        ``{"role-name": "...", "capabilities": ["read", ...]}`` and yields
        one ``Permission`` per capability.

        Raises:
            InvalidFormatError: If the response is not JSON, or the body
                does not have the shape above.
        """
        body = JsonHelper.from_response(response)
        if isinstance(body, dict):
            if PERMISSIONS not in body:
                raise InvalidFormatError("Metadata has no permissions")
            body = body[PERMISSIONS]
        if not isinstance(body, list):
            raise InvalidFormatError("Permissions must be a list")

        permissions = PermissionSet()
        for entry in body:
            if not isinstance(entry, dict):
                raise InvalidFormatError(f"Invalid permission entry: {entry!r}")
            role = dict.get(entry, ROLE_NAME)
            capabilities = dict.get(entry, CAPABILITIES)
            if not isinstance(role, str) or not isinstance(capabilities, list):
                raise InvalidFormatError(f"Invalid permission entry: {entry!r}")
            for capability in capabilities:
                try:
                    capability = Capability(capability)
                except ValueError as exc:
                    raise InvalidFormatError(f"Unknown capability {capability!r} for role {role!r}") from exc
                permissions.append(Permission(role, capability))
        return permissions
