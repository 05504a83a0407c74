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
"""Extraction of application-level results from responses.

The server reports many failures with an error envelope in the body, and
some of those come with a 2xx status. ``ResponseHelper.is_in_error`` looks
at the body, never at the status code, and ``ResponseHelper.get_outcome``
combines both into a single three-way answer:

    >>> outcome = ResponseHelper.get_outcome(response)
    >>> if outcome is Outcome.APPLICATION_ERROR:
    ...     print(ResponseHelper.get_error_message(response))

Aggregates are read either from a ``values-response`` body::

    {"values-response": {"aggregate-result": [{"name": "sum", "_value": "15"}]}}

or from a flat object mapping aggregate names to values::

    {"agg1": 3.14, "agg2": 2.71}
"""
from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any

from .collections import DictObject, ValuesResult
from .exceptions import AggregateNotFoundError, InvalidFormatError, ResponseStateError
from .json_helper import JsonHelper
from .log import timed
from .mime import ResponseType
from .models import SearchSuggestionSet
from .response import Response
from .xml_helper import XmlHelper, local_name


logger = logging.getLogger('mlclient')

ERROR_RESPONSE = 'errorResponse'
XML_ERROR_RESPONSE = 'error-response'
MESSAGE = 'message'
SUGGESTIONS = 'suggestions'
SUGGESTION = 'suggestion'
VALUES_RESPONSE = 'values-response'
AGGREGATE_RESULT = 'aggregate-result'


class Outcome(Enum):
    """What a response means for the caller."""

    SUCCESS = 'success'
    APPLICATION_ERROR = 'application_error'  # error envelope in the body
    TRANSPORT_ERROR = 'transport_error'  # 4xx/5xx without an error envelope


def _to_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidFormatError(f"Aggregate {name!r} is not a scalar value: {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise InvalidFormatError(f"Aggregate {name!r} is not numeric: {value!r}") from exc


def _to_complex(value: Any) -> Any:
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    if isinstance(value, dict) and not isinstance(value, DictObject):
        return DictObject(value)
    return value


class ResponseHelper:
    """Static functions reading structured results out of a ``Response``."""

    def __init__(self):
        raise TypeError("ResponseHelper only provides static methods")

    @staticmethod
    def _error_envelope(response: Response) -> dict | ET.Element | None:
        """Return the error envelope of the body, or ``None``.

        Bodies classified as XML are checked for ``<error-response>``, any
        other body is tried as JSON. A body that does not parse carries
        no envelope.
        """
        try:
            if response.get_response_type() is ResponseType.XML:
                root = XmlHelper.from_string(response.get_text())
                if local_name(root.tag) == XML_ERROR_RESPONSE:
                    return root
                return None
            body = JsonHelper.from_string(response.get_text())
        except InvalidFormatError:
            return None
        if isinstance(body, dict) and isinstance(dict.get(body, ERROR_RESPONSE), dict):
            return body[ERROR_RESPONSE]
        return None

    @staticmethod
    def _required_envelope(response: Response) -> dict | ET.Element:
        envelope = ResponseHelper._error_envelope(response)
        if envelope is None:
            raise ResponseStateError("Response is not in error")
        return envelope

    @staticmethod
    @timed
    def is_in_error(response: Response) -> bool:
        """Return whether the body of ``response`` is an error envelope.

        The status code is not consulted: a 200 may carry an error, and a
        500 may carry none.
        """
        return ResponseHelper._error_envelope(response) is not None

    @staticmethod
    @timed
    def get_error_message(response: Response) -> str:
        """Return the top level message of an error response.

        Raises:
            ResponseStateError: If the response is not in error.
        """
        envelope = ResponseHelper._required_envelope(response)
        if isinstance(envelope, ET.Element):
            for child in envelope:
                if local_name(child.tag) == MESSAGE:
                    return child.text or ''
            return ''
        message = dict.get(envelope, MESSAGE, '')
        return message if isinstance(message, str) else json.dumps(message)

    @staticmethod
    @timed
    def get_error_detail_as_string(response: Response) -> str:
        """Return the whole error envelope, stack trace included, as text.

        Raises:
            ResponseStateError: If the response is not in error.
        """
        envelope = ResponseHelper._required_envelope(response)
        if isinstance(envelope, ET.Element):
            # The envelope is the document root; keep the server's prefixes.
            return response.get_text().strip()
        return json.dumps(envelope, indent=2, ensure_ascii=False)

    @staticmethod
    @timed
    def get_suggestions(response: Response) -> SearchSuggestionSet:
        """Return the suggestions of a suggest response.

        Returns an empty set when the body is empty or has no suggestions.

        Raises:
            ResponseStateError: If the response is in error.
            InvalidFormatError: If the body does not parse.
        """
        if ResponseHelper.is_in_error(response):
            raise ResponseStateError("Response is in error: " + ResponseHelper.get_error_message(response))

        suggestions = SearchSuggestionSet()
        text = response.get_text()
        if not text.strip():
            return suggestions
        if response.get_response_type() is ResponseType.XML:
            root = XmlHelper.from_string(text)
            for element in root.iter():
                if local_name(element.tag) == SUGGESTION:
                    suggestions.append(element.text or '')
            return suggestions

        body = JsonHelper.from_string(text)
        values = dict.get(body, SUGGESTIONS, []) if isinstance(body, dict) else []
        if not isinstance(values, list):
            raise InvalidFormatError(f"Suggestions must be a list, not {type(values).__name__}")
        suggestions.extend(str(value) for value in values)
        return suggestions

    @staticmethod
    def _aggregates(response: Response) -> list[tuple[str, Any]]:
        """Return the ``(name, value)`` pairs of every aggregate in the body."""
        if ResponseHelper.is_in_error(response):
            raise ResponseStateError("Response is in error: " + ResponseHelper.get_error_message(response))
        body = JsonHelper.from_string(response.get_text())
        if not isinstance(body, dict):
            raise InvalidFormatError("Aggregate results must be a JSON object")

        if VALUES_RESPONSE not in body:
            return list(dict.items(body))

        results = body[VALUES_RESPONSE]
        results = dict.get(results, AGGREGATE_RESULT, []) if isinstance(results, dict) else None
        if isinstance(results, dict):
            results = [results]
        if not isinstance(results, list):
            raise InvalidFormatError("Invalid values-response")
        aggregates = []
        for result in results:
            if not isinstance(result, dict) or 'name' not in result:
                raise InvalidFormatError(f"Invalid aggregate result: {result!r}")
            aggregates.append((result['name'], dict.get(result, '_value', dict.get(result, 'value'))))
        return aggregates

    @staticmethod
    @timed
    def get_aggregate_result(response: Response, aggregate_name: str) -> float:
        """Return the scalar value of one named aggregate.

        Raises:
            AggregateNotFoundError: If no aggregate is called ``aggregate_name``.
            InvalidFormatError: If its value is not a number.
        """
        for name, value in ResponseHelper._aggregates(response):
            if name == aggregate_name:
                return _to_number(name, value)
        raise AggregateNotFoundError(f"No aggregate named {aggregate_name!r} in response")

    @staticmethod
    @timed
    def get_aggregate_results(response: Response, values_result: ValuesResult) -> None:
        """Add every scalar aggregate of ``response`` to ``values_result``.

        ``values_result`` is left untouched if any aggregate is composite.

        Raises:
            InvalidFormatError: If an aggregate is not a number; use
                ``get_complex_aggregate_results`` for those.
        """
        numbers = [(name, _to_number(name, value)) for name, value in ResponseHelper._aggregates(response)]
        for name, number in numbers:
            values_result.add(name, number)

    @staticmethod
    @timed
    def get_complex_aggregate_results(response: Response, values_result: ValuesResult) -> None:
        """Add every aggregate of ``response``, composite ones included.

        User-defined aggregate functions may return maps or arrays of
        values. Each array element is added as a separate value, maps are
        added as ``DictObject`` and numbers (or numeric strings) as floats.
        """
        for name, value in ResponseHelper._aggregates(response):
            if isinstance(value, list):
                for item in value:
                    values_result.add(name, _to_complex(item))
            else:
                values_result.add(name, _to_complex(value))

    @staticmethod
    def get_outcome(response: Response) -> Outcome:
        if ResponseHelper.is_in_error(response):
            return Outcome.APPLICATION_ERROR
        if response.get_response_code().is_error():
            return Outcome.TRANSPORT_ERROR
        return Outcome.SUCCESS
