# SPDX-License-Identifier: LGPL-3.0-or-later

import grp
import logging
import pwd
from typing import Protocol


logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    """Name service used to turn uids/gids into names and back.

    Every method returns None when the lookup fails.  Implementations must
    be safe to call from several threads at once.
    """
    def user_name(self, uid: int) -> str | None: ...
    def group_name(self, gid: int) -> str | None: ...
    def user_id(self, name: str) -> int | None: ...
    def group_id(self, name: str) -> int | None: ...


class SystemResolver:
    """IdentityResolver backed by the passwd and group databases."""

    def user_name(self, uid):
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            logger.debug('no passwd entry for uid %d', uid)
            return None

    def group_name(self, gid):
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            logger.debug('no group entry for gid %d', gid)
            return None

    def user_id(self, name):
        try:
            return pwd.getpwnam(name).pw_uid
        except (KeyError, ValueError):
            logger.debug('no passwd entry for user %r', name)
            return None

    def group_id(self, name):
        try:
            return grp.getgrnam(name).gr_gid
        except (KeyError, ValueError):
            logger.debug('no group entry for group %r', name)
            return None


DEFAULT_RESOLVER = SystemResolver()
