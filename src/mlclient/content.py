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
"""Document content model.

A document's content is its body plus a MIME type, independent of how it
travels on the wire. There are exactly two variants, text and binary,
told apart by their ``kind`` tag. JSON and XML documents are plain text
content; their structure is only imposed by ``JsonHelper`` and
``XmlHelper``.

MIME types are stored bare (``type/subtype``), UTF-8 is assumed
everywhere.

Example:
    >>> doc = GenericTextDocumentContent('{"a": 1}', MIME_JSON)
    >>> doc.get_length()
    8
    >>> doc.get_mime_type()
    'application/json'
"""
from __future__ import annotations

import io
import binascii
from abc import ABC, abstractmethod
from enum import Enum, IntEnum

from .exceptions import InvalidFormatError
from .mime import MIME_BINARY, MIME_JSON, MIME_XML, strip_parameters


class ContentKind(Enum):
    TEXT = 'text'
    BINARY = 'binary'


class BinaryEncoding(IntEnum):
    """Textual encodings of binary content."""

    HEX = 1  # characters 0-9a-f
    BIN = 2  # raw bytes as latin-1 characters, as in multipart bodies


class DocumentContent(ABC):
    """Capabilities shared by every document content variant."""

    MIME_JSON = MIME_JSON
    MIME_XML = MIME_XML

    kind: ContentKind

    @abstractmethod
    def get_stream(self) -> io.IOBase:
        """Return a new stream positioned at the start of the content."""

    @abstractmethod
    def get_content(self) -> str:
        """Return the content as a string."""

    @abstractmethod
    def get_mime_type(self) -> str:
        ...

    @abstractmethod
    def set_mime_type(self, mime_type: str) -> None:
        ...


class TextDocumentContent(DocumentContent):
    kind = ContentKind.TEXT

    @abstractmethod
    def set_content(self, content: str) -> None:
        ...

    @abstractmethod
    def get_length(self) -> int:
        """Return the number of characters in the content."""


class BinaryDocumentContent(DocumentContent):
    kind = ContentKind.BINARY

    @abstractmethod
    def set_content(self, content: str, encoding: BinaryEncoding = BinaryEncoding.HEX) -> None:
        ...

    @abstractmethod
    def get_content(self, encoding: BinaryEncoding = BinaryEncoding.HEX) -> str:
        ...

    @abstractmethod
    def set_bytes(self, data: bytes) -> None:
        ...

    @abstractmethod
    def get_bytes(self) -> bytes:
        ...

    @abstractmethod
    def get_length(self) -> int:
        """Return the length of the HEX encoding of the content."""


class GenericTextDocumentContent(TextDocumentContent):
    """Text content held in a string.

    Used for every JSON, XML and plain text document. Instances are values:
    copying one (``copy.copy``, ``copy.deepcopy`` or ``from_document``)
    yields an independent instance, and two instances compare equal when
    both MIME type and content match.

    Attributes:
        content: The textual body.
        mime_type: Bare MIME type, ``application/json`` unless given.
    """

    def __init__(self, content: str = '', mime_type: str = MIME_JSON) -> None:
        self.content = ''
        self.mime_type = MIME_JSON
        self.set_content(content)
        self.set_mime_type(mime_type)

    @classmethod
    def from_document(cls, doc: TextDocumentContent) -> GenericTextDocumentContent:
        """Copy any text document content into a new instance."""
        return cls(doc.get_content(), doc.get_mime_type())

    def set_content(self, content: str) -> None:
        if not isinstance(content, str):
            raise TypeError(f"Text content must be a str, not {type(content).__name__}")
        self.content = content

    def get_content(self) -> str:
        return self.content

    def get_stream(self) -> io.StringIO:
        return io.StringIO(self.content)

    def get_mime_type(self) -> str:
        return self.mime_type

    def set_mime_type(self, mime_type: str) -> None:
        self.mime_type = strip_parameters(mime_type)

    def get_length(self) -> int:
        return len(self.content)

    def __eq__(self, other):
        if not isinstance(other, DocumentContent):
            return NotImplemented
        return (
            other.kind is self.kind
            and other.get_mime_type() == self.mime_type
            and other.get_content() == self.content
        )

    def __hash__(self):
        return hash((self.kind, self.mime_type, self.content))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(mime_type={self.mime_type!r}, length={len(self.content)})'


class GenericBinaryDocumentContent(BinaryDocumentContent):
    """Binary content held in a bytes buffer.

    The textual form defaults to ``BinaryEncoding.HEX``. Content given as
    a bytes-like object is copied, the instance never aliases a caller's
    mutable buffer.
    """

    def __init__(self, content: bytes = b'', mime_type: str = MIME_BINARY) -> None:
        self.data = b''
        self.mime_type = MIME_BINARY
        self.set_bytes(content)
        self.set_mime_type(mime_type)

    def set_bytes(self, data: bytes) -> None:
        self.data = bytes(data)

    def get_bytes(self) -> bytes:
        return self.data

    def set_content(self, content: str, encoding: BinaryEncoding = BinaryEncoding.HEX) -> None:
        """Set the content from its textual encoding.

        Raises:
            InvalidFormatError: If ``content`` is not valid for ``encoding``.
        """
        if encoding == BinaryEncoding.HEX:
            try:
                self.data = binascii.unhexlify(content)
            except (binascii.Error, ValueError) as exc:
                raise InvalidFormatError(f"Invalid hexadecimal content: {exc}") from exc
        else:
            try:
                self.data = content.encode('latin-1')
            except UnicodeEncodeError as exc:
                raise InvalidFormatError(f"Invalid binary content: {exc}") from exc

    def get_content(self, encoding: BinaryEncoding = BinaryEncoding.HEX) -> str:
        if encoding == BinaryEncoding.HEX:
            return self.data.hex()
        return self.data.decode('latin-1')

    def get_stream(self) -> io.BytesIO:
        return io.BytesIO(self.data)

    def get_mime_type(self) -> str:
        return self.mime_type

    def set_mime_type(self, mime_type: str) -> None:
        self.mime_type = strip_parameters(mime_type)

    def get_length(self) -> int:
        return len(self.data) * 2

    def __eq__(self, other):
        if not isinstance(other, BinaryDocumentContent):
            return NotImplemented
        return other.get_mime_type() == self.mime_type and other.get_bytes() == self.data

    def __hash__(self):
        return hash((self.kind, self.mime_type, self.data))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(mime_type={self.mime_type!r}, size={len(self.data)})'


def document_text(doc: DocumentContent) -> str:
    """Return the textual form of any document content.

    Text variants give their content as is; binary variants are decoded
    as UTF-8.

    Raises:
        InvalidFormatError: If binary content is not valid UTF-8.
    """
    if doc.kind is ContentKind.BINARY:
        try:
            return doc.get_bytes().decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidFormatError(f"Binary content is not UTF-8 text: {exc}") from exc
    return doc.get_content()
