# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Text codec for rich (NFSv4-style) access control lists.

richacl_to_text() and richacl_from_text() convert between a RichACL value
and its editable text form, for example::

    flags:a
    owner@:rwpxdDaARWcCoS::allow
    everyone@:rwx:fd:allow
    staff:rx:g:deny

Names are resolved through an IdentityResolver; the default uses the
passwd and group databases.
"""

from ._acl import RichACL, RichAce
from ._enums import (
    ACLFlag,
    AceFlag,
    AceType,
    Context,
    POSIX_ALWAYS_ALLOWED,
    Perm,
    SpecialWho,
    TextFormat,
    TextSection,
)
from ._errors import (
    ACLTextError,
    MalformedEntryError,
    UnknownTokenError,
    UnresolvableIdentifierError,
)
from ._fromtext import ParseResult, richacl_from_text, richacl_mask_from_text
from ._resolver import IdentityResolver, SystemResolver
from ._totext import richacl_to_dict, richacl_to_text
from ._write import richacl_mask_to_text

__all__ = [
    'ACLFlag',
    'ACLTextError',
    'AceFlag',
    'AceType',
    'Context',
    'IdentityResolver',
    'MalformedEntryError',
    'POSIX_ALWAYS_ALLOWED',
    'ParseResult',
    'Perm',
    'RichACL',
    'RichAce',
    'SpecialWho',
    'SystemResolver',
    'TextFormat',
    'TextSection',
    'UnknownTokenError',
    'UnresolvableIdentifierError',
    'richacl_from_text',
    'richacl_mask_from_text',
    'richacl_mask_to_text',
    'richacl_to_dict',
    'richacl_to_text',
]
