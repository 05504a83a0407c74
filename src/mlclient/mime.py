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
"""Content-Type classification.

Maps the free-text value of a ``Content-Type`` header to one of the
``ResponseType`` categories. Only the first ``major/minor`` pair found in
the value is considered; parameters such as ``charset`` are ignored.

Example:
    >>> classify('application/json; charset=utf-8')
    <ResponseType.JSON: 'json'>
    >>> classify('image/png')
    <ResponseType.BINARY: 'binary'>
"""
from __future__ import annotations

import re
from enum import Enum


MIME_JSON = 'application/json'
MIME_XML = 'application/xml'
MIME_TEXT = 'text/plain'
MIME_BINARY = 'application/octet-stream'

CONTENT_TYPE_RE = re.compile(r'([a-zA-Z.]+)/([a-zA-Z.]+)')

_MAJORS = ('application', 'text')
_MINORS = {
    'json': 'JSON',
    'html': 'XML',
    'xml': 'XML',
    'plain': 'TEXT',
}


class ResponseType(Enum):
    """Structural category of a response body."""

    JSON = 'json'
    XML = 'xml'
    TEXT = 'text'
    BINARY = 'binary'
    UNKNOWN_TYPE = 'unknown'

    def __str__(self) -> str:
        return f'ResponseType.{self.name}'


def classify(content_type: str | None) -> ResponseType:
    """Classify a ``Content-Type`` header value.

    Args:
        content_type: Raw header value, e.g. ``'text/plain'``. ``None`` and
            empty strings are accepted.

    Returns:
        ResponseType: ``JSON``, ``XML`` or ``TEXT`` for the recognized
            ``application/*`` and ``text/*`` subtypes, ``BINARY`` for
            everything else, including values that do not parse.
    """
    if not content_type:
        return ResponseType.BINARY
    match = CONTENT_TYPE_RE.search(content_type)
    if match is None:
        return ResponseType.BINARY
    major, minor = match.groups()
    if major in _MAJORS and minor in _MINORS:
        return ResponseType[_MINORS[minor]]
    return ResponseType.BINARY


def strip_parameters(mime_type: str) -> str:
    """Return the bare ``type/subtype`` of a MIME type string.

    >>> strip_parameters('application/json; charset=utf-8')
    'application/json'
    """
    return mime_type.partition(';')[0].strip()
