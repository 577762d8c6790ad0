# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Exceptions raised by richacl_from_text() and the standalone decoders.

All of them are ValueError subclasses and carry a message meant to be
shown to the user as is.  Running out of memory surfaces as the built-in
MemoryError.
"""


class ACLTextError(ValueError):
    """Base class for rich ACL text decoding failures."""


class MalformedEntryError(ACLTextError):
    """An entry does not have the expected colon-separated fields."""


class UnknownTokenError(ACLTextError):
    """A flag, mask, type or mask-line token is not recognised."""


class UnresolvableIdentifierError(ACLTextError):
    """A user, group or special identifier cannot be resolved."""
