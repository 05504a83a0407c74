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
"""Exceptions raised by the mlclient package."""
from __future__ import annotations

import httpx


class MLClientError(Exception):
    """Base class for every error raised by mlclient."""


class InvalidFormatError(MLClientError):
    """Raised when a body does not conform to the expected format.

    Covers parse failures (malformed JSON or XML), bodies whose shape is
    not the one an extractor expects, and responses whose classified type
    does not match what an operation requires.
    """


class NoCredentialsError(MLClientError):
    """Raised when a request is attempted without username or password."""


class ResponseStateError(MLClientError):
    """Raised when a response is not in the error state an accessor requires.

    ``ResponseHelper.get_error_message`` needs a response in error,
    ``ResponseHelper.get_suggestions`` needs one that is not.
    """


class AggregateNotFoundError(MLClientError, KeyError):
    """Raised when a named aggregate is not present in a values response."""

    def __str__(self) -> str:
        return Exception.__str__(self)


InvalidFormatException = InvalidFormatError
NoCredentialsException = NoCredentialsError
# Connection never raises on HTTP status; this is what httpx.Response.raise_for_status
# raises for callers that want status errors as exceptions.
TransportError = httpx.HTTPStatusError
