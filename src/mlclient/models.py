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
"""Result models extracted from server responses."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Capability(Enum):
    """Operations a role may be granted on a document."""

    READ = 'read'
    UPDATE = 'update'
    INSERT = 'insert'
    EXECUTE = 'execute'
    NODE_UPDATE = 'node-update'


class Permission(NamedTuple):
    role: str
    capability: Capability


class PermissionSet(list):
    """Permissions of a document, in the order the server returned them."""

    def roles(self) -> list[str]:
        seen = []
        for permission in self:
            if permission.role not in seen:
                seen.append(permission.role)
        return seen

    def capabilities_for(self, role: str) -> list[Capability]:
        return [p.capability for p in self if p.role == role]


class SearchSuggestionSet(list):
    """Suggestion strings, in server order."""
