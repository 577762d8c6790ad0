# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Pytest fixtures for richacl codec tests.

Name lookups go through a dictionary-backed resolver so that output does
not depend on the passwd and group databases of the test host.
"""

import pytest


# ── resolver ──────────────────────────────────────────────────────────────────

_USERS = {
    'root':  0,
    'alice': 1000,
    'bob':   1001,
}

_GROUPS = {
    'wheel':                0,
    'staff':                50,
    'administrators-group': 2000,
}


class DictResolver:
    """IdentityResolver over fixed name/id tables."""

    def __init__(self, users, groups):
        self._users = dict(users)
        self._groups = dict(groups)
        self._uids = {v: k for k, v in self._users.items()}
        self._gids = {v: k for k, v in self._groups.items()}

    def user_name(self, uid):
        return self._uids.get(uid)

    def group_name(self, gid):
        return self._gids.get(gid)

    def user_id(self, name):
        return self._users.get(name)

    def group_id(self, name):
        return self._groups.get(name)


@pytest.fixture
def resolver():
    """Resolver knowing root/alice/bob and wheel/staff/administrators-group."""
    return DictResolver(_USERS, _GROUPS)


@pytest.fixture
def make_resolver():
    """Factory for resolvers with custom user and group tables."""
    return DictResolver


@pytest.fixture
def errors():
    """Collected error sink messages; pass errors.append as the sink."""
    return []
