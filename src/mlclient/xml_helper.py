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
"""Conversions between XML elements, document content and responses.

Parsed XML is the root ``xml.etree.ElementTree.Element`` of the document.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from .content import DocumentContent, GenericTextDocumentContent, document_text
from .exceptions import InvalidFormatError
from .log import timed
from .mime import MIME_XML, ResponseType, classify
from .response import Response


logger = logging.getLogger('mlclient')


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part of an ElementTree tag."""
    return tag.rpartition('}')[2]


class XmlHelper:
    """Static functions converting XML between its representations."""

    def __init__(self):
        raise TypeError("XmlHelper only provides static methods")

    @staticmethod
    def from_string(text: str) -> ET.Element:
        try:
            return ET.fromstring(text)
        except ET.ParseError as exc:
            logger.debug(f"@@@>> INVALID XML: {exc} :: {text!r:.200}")
            raise InvalidFormatError(f"Invalid XML: {exc}") from exc

    @staticmethod
    @timed
    def to_document(value: ET.Element | ET.ElementTree | Response) -> GenericTextDocumentContent:
        """Serialize an XML element, or the XML body of a response, as text content.

        Raises:
            InvalidFormatError: If a response body is not well-formed XML,
                or ``value`` is not an element.
        """
        if isinstance(value, Response):
            value = XmlHelper.from_string(value.get_text())
        if isinstance(value, ET.ElementTree):
            value = value.getroot()
        if not isinstance(value, ET.Element):
            raise InvalidFormatError(f"Cannot serialize {type(value).__name__} as XML")
        return GenericTextDocumentContent(ET.tostring(value, encoding='unicode'), MIME_XML)

    @staticmethod
    @timed
    def from_document(doc: DocumentContent, check_mime_type: bool = False) -> ET.Element:
        """Parse the content of a document as XML.

        As with ``JsonHelper.from_document``, the MIME type is only
        checked when ``check_mime_type`` is set.

        Raises:
            InvalidFormatError: If the content is not well-formed XML, or
                its MIME type is refused.
        """
        if check_mime_type and classify(doc.get_mime_type()) is not ResponseType.XML:
            raise InvalidFormatError(f"Document MIME type {doc.get_mime_type()!r} is not XML")
        return XmlHelper.from_string(document_text(doc))

    @staticmethod
    @timed
    def from_response(response: Response) -> ET.Element:
        """Parse the body of a response classified as XML.

        Raises:
            InvalidFormatError: If the response is not classified
                ``ResponseType.XML``, or its body is not well-formed.
        """
        if response.get_response_type() is not ResponseType.XML:
            raise InvalidFormatError(f"Response is {response.get_response_type()}, not XML")
        return XmlHelper.from_string(response.get_text())
