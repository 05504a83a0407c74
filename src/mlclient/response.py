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
"""Classified HTTP responses.

A ``Response`` holds the status code, headers and body of one HTTP
exchange, plus the ``ResponseType`` inferred from its content type header.
It is filled in by the transport through its setters and treated as
read-only afterwards.

Example:
    >>> resp = Response()
    >>> resp.set_response_code(200)
    >>> resp.set_response_headers({'Content-Type': 'application/json'})
    >>> resp.set_content(b'{"first": "value1"}')
    >>> resp.get_response_type()
    <ResponseType.JSON: 'json'>
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import IntEnum

import httpx

from .collections import HttpHeaders
from .exceptions import InvalidFormatError
from .mime import ResponseType, classify


__all__ = ['Response', 'ResponseCode', 'ResponseType']

logger = logging.getLogger('mlclient')

CONTENT_TYPE_HEADERS = ('Content-Type', 'Content-type')


class ResponseCode(IntEnum):
    """HTTP status codes known to the client."""

    UNKNOWN_CODE = 0
    CONTINUE = 100
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUEST_RANGE_BAD = 416
    EXPECTATION_FAILED = 417
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505

    @classmethod
    def from_status(cls, status: int) -> ResponseCode:
        """Return the member for ``status``, or ``UNKNOWN_CODE``."""
        try:
            return cls(status)
        except ValueError:
            return cls.UNKNOWN_CODE

    @property
    def description(self) -> str:
        return _DESCRIPTIONS.get(self, self.name.replace('_', ' ').title())

    def is_success(self) -> bool:
        return 200 <= self < 300

    def is_error(self) -> bool:
        return self >= 400 or self is ResponseCode.UNKNOWN_CODE

    def __str__(self) -> str:
        return self.description


_DESCRIPTIONS = {
    ResponseCode.UNKNOWN_CODE: 'Unknown',
    ResponseCode.OK: 'OK',
    ResponseCode.NO_CONTENT: 'No Content or Updated (MarkLogic REST API)',
    ResponseCode.REQUEST_URI_TOO_LONG: 'Request URI Too Long',
    ResponseCode.REQUEST_RANGE_BAD: 'Request Range Not Satisfiable',
    ResponseCode.HTTP_VERSION_NOT_SUPPORTED: 'HTTP Version Not Supported',
}


class Response:
    """Status, headers and body of one HTTP exchange.

    ``response_type`` always reflects the content type header of the most
    recent ``set_response_headers`` call (``BINARY`` when there is none),
    unless ``set_response_type`` was called after it. No consistency is
    enforced between code and type: a 500 with a JSON body is ordinary.

    Attributes:
        response_code: The ``ResponseCode`` of the exchange.
        response_type: The ``ResponseType`` of the body.
        headers: The ``HttpHeaders`` received.
        content: The body, as ``bytes`` or ``str`` exactly as it was set.
    """

    def __init__(self) -> None:
        self.response_code = ResponseCode.UNKNOWN_CODE
        self.response_type = ResponseType.UNKNOWN_TYPE
        self.headers = HttpHeaders()
        self.content: bytes | str = ''

    @classmethod
    def from_httpx(cls, res: httpx.Response) -> Response:
        """Build a ``Response`` from a fully read ``httpx.Response``."""
        response = cls()
        response.set_response_code(res.status_code)
        response.set_response_headers(res.headers.multi_items())
        response.set_content(res.content)
        return response

    def set_response_code(self, code: ResponseCode | int) -> None:
        if not isinstance(code, ResponseCode):
            code = ResponseCode.from_status(code)
        self.response_code = code

    def get_response_code(self) -> ResponseCode:
        return self.response_code

    def set_response_type(self, response_type: ResponseType) -> None:
        self.response_type = response_type

    def get_response_type(self) -> ResponseType:
        return self.response_type

    def set_response_headers(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        """Replace the headers and reclassify the body.

        The content type header is looked up as ``Content-Type``, then
        ``Content-type``, then as the first name matching either
        case-insensitively, in insertion order. Without one the response
        is classified ``BINARY``.

        Args:
            headers: A mapping or an iterable of ``(name, value)`` pairs.
                With pairs, a repeated name keeps its last value.
        """
        self.headers = HttpHeaders(headers)
        content_type = self._content_type_header()
        self.response_type = classify(content_type)
        logger.debug(f"@@@>> CONTENT-TYPE: {content_type!r} :: TYPE: {self.response_type}")

    def _content_type_header(self) -> str | None:
        for name in CONTENT_TYPE_HEADERS:
            if name in self.headers:
                return self.headers[name]
        for name, value in self.headers.items():
            if name.lower() == 'content-type':
                return value
        return None

    def get_response_headers(self) -> HttpHeaders:
        return self.headers.copy()

    def set_content(self, content: bytes | bytearray | memoryview | str | None) -> None:
        """Store a copy of ``content`` as the body.

        Strings are kept as strings, any bytes-like object is copied into
        new ``bytes``. ``None`` empties the body.
        """
        if content is None:
            content = b''
        elif not isinstance(content, str):
            content = bytes(content)
        self.content = content

    def get_content(self) -> bytes | str:
        return self.content

    def get_text(self) -> str:
        """Return the body as a string, decoding bytes as UTF-8.

        Raises:
            InvalidFormatError: If the body is not valid UTF-8.
        """
        if isinstance(self.content, str):
            return self.content
        try:
            return self.content.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidFormatError(f"Response body is not valid UTF-8: {exc}") from exc

    def get_bytes(self) -> bytes:
        if isinstance(self.content, str):
            return self.content.encode('utf-8')
        return self.content

    def read(self, buffer: bytearray | memoryview, max_size: int, offset: int = 0) -> int:
        """Copy part of the body into ``buffer``.

        Lets callers page through a large body with a fixed size buffer.

        Args:
            buffer: Writable bytes-like object receiving the data.
            max_size: Maximum number of bytes to copy; also capped by the
                size of ``buffer``.
            offset: Position in the body to start reading from.

        Returns:
            int: The number of bytes copied, ``0`` once ``offset`` is at or
                past the end of the body.
        """
        if offset < 0 or max_size < 0:
            raise ValueError("offset and max_size must not be negative")
        data = self.get_bytes()
        chunk = data[offset:offset + min(max_size, len(buffer))]
        size = len(chunk)
        memoryview(buffer)[:size] = chunk
        return size

    def __repr__(self) -> str:
        return f'<Response [{self.response_code.value} {self.response_type}]>'
