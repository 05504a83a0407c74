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
"""MarkLogic REST client library.

Provides the ``Connection`` async client, which performs document CRUD,
suggest and values requests against a MarkLogic REST server, and the layer
that makes sense of what comes back: every call returns a ``Response``
whose body is classified from its content type, ready to be converted with
``JsonHelper`` / ``XmlHelper`` or inspected with ``ResponseHelper``.

Configuration is read from environment variables (``MLCLIENT_HOST``,
``MLCLIENT_PORT``, ``MLCLIENT_USERNAME``, ``MLCLIENT_PASSWORD``,
``MLCLIENT_AUTH``). Nothing is configured or connected at import time; see
``mlclient.log.init_logging`` for log output.

Example:
    >>> from mlclient import Connection, ResponseHelper, Outcome
    >>> ml = Connection(host='localhost:8000', username='admin', password='admin')
    >>> response = await ml.get_document('/example/doc.json')
    >>> if ResponseHelper.get_outcome(response) is Outcome.SUCCESS:
    ...     doc = JsonHelper.from_response(response)
"""
from __future__ import annotations

import os
import logging
from functools import cached_property

import httpx

from .collections import DictObject, HttpHeaders, ValuesResult
from .content import (
    BinaryDocumentContent,
    BinaryEncoding,
    ContentKind,
    DocumentContent,
    GenericBinaryDocumentContent,
    GenericTextDocumentContent,
    TextDocumentContent,
)
from .exceptions import (
    AggregateNotFoundError,
    InvalidFormatError,
    InvalidFormatException,
    MLClientError,
    NoCredentialsError,
    NoCredentialsException,
    ResponseStateError,
    TransportError,
)
from .json_helper import JsonHelper
from .mime import MIME_BINARY, MIME_JSON, MIME_TEXT, MIME_XML, classify
from .models import Capability, Permission, PermissionSet, SearchSuggestionSet
from .response import Response, ResponseCode, ResponseType
from .response_helper import Outcome, ResponseHelper
from .xml_helper import XmlHelper


__version__ = '1.0.0'
__all__ = [
    'Connection',
    'Response',
    'ResponseCode',
    'ResponseType',
    'classify',
    'HttpHeaders',
    'DictObject',
    'ValuesResult',
    'DocumentContent',
    'TextDocumentContent',
    'BinaryDocumentContent',
    'GenericTextDocumentContent',
    'GenericBinaryDocumentContent',
    'ContentKind',
    'BinaryEncoding',
    'JsonHelper',
    'XmlHelper',
    'ResponseHelper',
    'Outcome',
    'Capability',
    'Permission',
    'PermissionSet',
    'SearchSuggestionSet',
    'MLClientError',
    'InvalidFormatError',
    'InvalidFormatException',
    'NoCredentialsError',
    'NoCredentialsException',
    'ResponseStateError',
    'AggregateNotFoundError',
    'TransportError',
    'MIME_JSON',
    'MIME_XML',
    'MIME_TEXT',
    'MIME_BINARY',
    'MLCLIENT_HOST',
    'MLCLIENT_PORT',
    'MLCLIENT_USERNAME',
    'MLCLIENT_PASSWORD',
    'MLCLIENT_AUTH',
]

logger = logging.getLogger('mlclient')

API_VERSION = 'v1'

MLCLIENT_HOST = os.environ.get('MLCLIENT_HOST', 'localhost')
MLCLIENT_PORT = os.environ.get('MLCLIENT_PORT', 8000)
MLCLIENT_USERNAME = os.environ.get('MLCLIENT_USERNAME')
MLCLIENT_PASSWORD = os.environ.get('MLCLIENT_PASSWORD')
MLCLIENT_AUTH = os.environ.get('MLCLIENT_AUTH', 'digest')


class Connection:
    """Async connection to a MarkLogic REST API server.

    Every request method returns a ``Response`` whatever the HTTP status,
    so that callers can branch on ``ResponseHelper.get_outcome``. Only
    network failures raised by ``httpx`` propagate. No retries are made and
    redirects are not followed.

    Attributes:
        host: Server hostname.
        port: Server port.
        username: User to authenticate as.
        password: Password of ``username``.
        auth: ``'digest'`` or ``'basic'``.
        database: Database to run requests against, or ``None`` for the
            REST server's default.

    Example:
        >>> ml = Connection(host='localhost', port=8000, username='admin', password='admin')
        >>> doc = GenericTextDocumentContent('{"first": "value1"}', MIME_JSON)
        >>> response = await ml.save_document_content('/doc.json', doc)
        >>> response.get_response_code()
        <ResponseCode.CREATED: 201>
    """

    NoCredentialsError = NoCredentialsError

    def __init__(self, host: str | None = None, port: str | int | None = None,
            username: str | None = None, password: str | None = None,
            auth: str | None = None, database: str | None = None) -> None:
        """Initialize the connection.

        Args:
            host: Server hostname. If it contains a colon, the part after
                it is used as the port. Defaults to ``MLCLIENT_HOST``.
            port: Server port. Defaults to ``MLCLIENT_PORT`` or ``8000``.
            username: Defaults to ``MLCLIENT_USERNAME``.
            password: Defaults to ``MLCLIENT_PASSWORD``.
            auth: Authentication scheme, ``'digest'`` (default) or
                ``'basic'``.
            database: Optional database name sent with every request.
        """
        if host is None:
            host = MLCLIENT_HOST
        if port is None:
            port = MLCLIENT_PORT
        if host and ':' in host:
            host, _, port = host.partition(':')
        self.host = host
        self.port = port
        self.username = MLCLIENT_USERNAME if username is None else username
        self.password = MLCLIENT_PASSWORD if password is None else password
        self.auth = (MLCLIENT_AUTH if auth is None else auth).lower()
        if self.auth not in ('digest', 'basic'):
            raise ValueError(f"Unsupported authentication scheme: {auth!r}")
        self.database = database

    @cached_property
    def session(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(trust_env=False, follow_redirects=False)

    async def aclose(self) -> None:
        session = self.__dict__.pop('session', None)
        if session is not None:
            await session.aclose()

    def _build_url(self, endpoint: str) -> str:
        return f'http://{self.host}:{self.port}/{API_VERSION}/{endpoint.strip("/")}'

    def _build_auth(self) -> httpx.Auth:
        if not self.username or not self.password:
            raise NoCredentialsError("No username or password configured for this connection")
        if self.auth == 'basic':
            return httpx.BasicAuth(self.username, self.password)
        return httpx.DigestAuth(self.username, self.password)

    async def _send_request(self, method: str, endpoint: str, params: dict | None = None,
            content: bytes | None = None, headers: dict | None = None) -> Response:
        """Send a request and wrap whatever comes back in a ``Response``.

        Args:
            method: HTTP method.
            endpoint: Path below ``/v1/``, e.g. ``'documents'``.
            params: Query parameters; ``None`` values are dropped.
            content: Request body.
            headers: Extra request headers.

        Returns:
            Response: The classified response.

        Raises:
            NoCredentialsError: If username or password is missing. Raised
                before anything is sent.
            httpx.HTTPError: On network failures.
        """
        auth = self._build_auth()
        url = self._build_url(endpoint)
        params = {k: v for k, v in (params or {}).items() if v is not None}
        if self.database is not None:
            params.setdefault('database', self.database)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"@@@>> {method} URL: {url}  ::  PARAMS: {params}  ::  HEADERS: {headers}")
        res = await self.session.request(method, url, params=params, content=content,
                                         headers=headers, auth=auth)
        response = Response.from_httpx(res)
        logger.debug(f"@@@RES>> {response!r}")
        return response

    async def get_document(self, uri: str, accept: str | None = None) -> Response:
        """Fetch the content of the document at ``uri``.

        Args:
            uri: Document URI.
            accept: Optional ``Accept`` header.
        """
        headers = {'accept': accept} if accept is not None else None
        return await self._send_request('GET', 'documents', params={'uri': uri}, headers=headers)

    async def save_document_content(self, uri: str, content: DocumentContent) -> Response:
        """Create or replace the document at ``uri``.

        The body is sent with the content's MIME type; text content is
        encoded as UTF-8, binary content is sent as raw bytes.
        """
        if content.kind is ContentKind.BINARY:
            body = content.get_bytes()
        else:
            body = content.get_content().encode('utf-8')
        headers = {'content-type': content.get_mime_type()}
        return await self._send_request('PUT', 'documents', params={'uri': uri},
                                        content=body, headers=headers)

    async def delete_document(self, uri: str) -> Response:
        return await self._send_request('DELETE', 'documents', params={'uri': uri})

    async def get_document_metadata(self, uri: str, category: str = 'permissions') -> Response:
        """Fetch metadata of the document at ``uri`` as JSON.

        Pass the response to ``JsonHelper.permissions_from_response`` to
        read the permissions.
        """
        params = {'uri': uri, 'category': category, 'format': 'json'}
        return await self._send_request('GET', 'documents', params=params)

    async def suggest(self, partial_q: str, qtext: str | None = None,
            options: str | None = None, limit: int | None = None) -> Response:
        """Request search suggestions for the partial query ``partial_q``.

        Read them with ``ResponseHelper.get_suggestions``.
        """
        params = {'partial-q': partial_q, 'q': qtext, 'options': options, 'limit': limit}
        return await self._send_request('GET', 'suggest', params=params,
                                        headers={'accept': MIME_JSON})

    async def values(self, name: str, aggregate: str | None = None,
            options: str | None = None, aggregate_path: str | None = None) -> Response:
        """Compute aggregates over the lexicon ``name``.

        Read the results with ``ResponseHelper.get_aggregate_result`` or
        ``ResponseHelper.get_aggregate_results``.
        """
        params = {
            'aggregate': aggregate,
            'aggregatePath': aggregate_path,
            'options': options,
            'format': 'json',
        }
        return await self._send_request('GET', f'values/{name}', params=params)
