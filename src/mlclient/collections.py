# -*- coding: utf-8 -*-
#
# Copyright (c) 2015-2019 Dubalu LLC
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
"""Mapping types used across the client.

``DictObject`` is the ``object_pairs_hook`` used when parsing JSON bodies,
giving attribute-style access to response fields. ``HttpHeaders`` holds
response headers exactly as the transport delivered them. ``ValuesResult``
collects aggregate values extracted from a values response.

Example:
    >>> obj = DictObject(name='test', value=42)
    >>> obj.name
    'test'
    >>> headers = HttpHeaders({'Content-Type': 'application/json'})
    >>> headers.get_header('content-type')
    ''
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class DictObject(dict):
    """Dictionary with attribute-style access.

    Maps its internal ``__dict__`` to itself so keys can be read and
    written as attributes. Keys that are not valid identifiers, such as
    ``role-name``, remain reachable through item access.

    Example:
        >>> obj = DictObject(errorResponse=DictObject(message='bad input'))
        >>> obj.errorResponse.message
        'bad input'
    """

    def __init__(self, *args, **kwargs):
        dict.__init__(self, *args, **kwargs)
        self.__dict__ = self


class HttpHeaders(dict):
    """Ordered header map with case-sensitive names.

    Header names are kept exactly as given; ``Content-Type`` and
    ``Content-type`` are two different keys. Setting an existing name
    replaces its value (last write wins) without moving it.
    """

    def __init__(self, headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None):
        dict.__init__(self)
        if headers is not None:
            items = headers.items() if isinstance(headers, Mapping) else headers
            for name, value in items:
                self.set_header(name, value)

    def set_header(self, name: str, value: str) -> None:
        self[name] = value

    def get_header(self, name: str, default: str = '') -> str:
        """Return the value stored under exactly ``name``, or ``default``."""
        return self.get(name, default)

    def get_headers(self) -> list[tuple[str, str]]:
        return list(self.items())

    def copy(self) -> HttpHeaders:
        return HttpHeaders(self)


class ValuesResult(dict):
    """Aggregate values keyed by aggregate (or UDF) name.

    Each name maps to a list of one or more values. The result is filled
    incrementally through ``add``; a name already present is never
    replaced wholesale, new values are appended to it instead.

    Example:
        >>> vr = ValuesResult()
        >>> vr.add('sum', 10.0)
        >>> vr.add('sum', 12.5)
        >>> vr['sum']
        [10.0, 12.5]
        >>> vr.get_value('sum')
        10.0
    """

    def __setitem__(self, name: str, value: Any) -> None:
        if name in self:
            raise KeyError(f"Aggregate {name!r} is already populated, use add()")
        dict.__setitem__(self, name, value)

    def add(self, name: str, value: Any) -> None:
        """Append ``value`` to the values collected for ``name``."""
        if name not in self:
            dict.__setitem__(self, name, [])
        self[name].append(value)

    def get_value(self, name: str) -> Any:
        """Return the first value collected for ``name``.

        Raises:
            KeyError: If nothing was collected for ``name``.
        """
        return self[name][0]

    def names(self) -> list[str]:
        return list(self.keys())
