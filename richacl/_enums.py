# SPDX-License-Identifier: LGPL-3.0-or-later

from enum import IntEnum, IntFlag


# ── ACL / ACE enums ───────────────────────────────────────────────────────────

class ACLFlag(IntFlag):
    AUTO_INHERIT = 0x01
    PROTECTED    = 0x02
    DEFAULTED    = 0x04
    POSIX_MAPPED = 0x10
    MASKED       = 0x80


class AceType(IntEnum):
    ALLOW = 0
    DENY  = 1


class AceFlag(IntFlag):
    FILE_INHERIT         = 0x0001
    DIRECTORY_INHERIT    = 0x0002
    NO_PROPAGATE_INHERIT = 0x0004
    INHERIT_ONLY         = 0x0008
    SUCCESSFUL_ACCESS    = 0x0010
    FAILED_ACCESS        = 0x0020
    IDENTIFIER_GROUP     = 0x0040
    INHERITED            = 0x0080
    SPECIAL_WHO          = 0x0100   # implied by a SpecialWho identifier


class Perm(IntFlag):
    """Access mask bits.

    The low three bits carry a file meaning and a directory meaning;
    both names are members and compare equal.
    """
    READ_DATA            = 0x00000001
    LIST_DIRECTORY       = 0x00000001
    WRITE_DATA           = 0x00000002
    ADD_FILE             = 0x00000002
    APPEND_DATA          = 0x00000004
    ADD_SUBDIRECTORY     = 0x00000004
    READ_NAMED_ATTRS     = 0x00000008
    WRITE_NAMED_ATTRS    = 0x00000010
    EXECUTE              = 0x00000020
    DELETE_CHILD         = 0x00000040
    READ_ATTRIBUTES      = 0x00000080
    WRITE_ATTRIBUTES     = 0x00000100
    WRITE_RETENTION      = 0x00000200
    WRITE_RETENTION_HOLD = 0x00000400
    DELETE               = 0x00010000
    READ_ACL             = 0x00020000
    WRITE_ACL            = 0x00040000
    WRITE_OWNER          = 0x00080000
    SYNCHRONIZE          = 0x00100000


# Permissions POSIX semantics grant to everybody; SIMPLIFY hides them.
POSIX_ALWAYS_ALLOWED = Perm.SYNCHRONIZE | Perm.READ_ATTRIBUTES | Perm.READ_ACL


class SpecialWho(IntEnum):
    """Identities that are not a uid/gid.  Written as lowercase name + '@'."""
    OWNER         = 0
    GROUP         = 1
    EVERYONE      = 2
    INTERACTIVE   = 3
    NETWORK       = 4
    DIALUP        = 5
    BATCH         = 6
    ANONYMOUS     = 7
    AUTHENTICATED = 8
    SERVICE       = 9
    ADMINISTRATOR = 10
    ADMINUSERS    = 11
    NOBODY        = 12
    UNKNOWN       = 13


# ── text codec options ────────────────────────────────────────────────────────

class TextFormat(IntFlag):
    """Formatting options for richacl_to_text().  Short form unless LONG."""
    LONG              = 0x01
    FILE_CONTEXT      = 0x02
    DIRECTORY_CONTEXT = 0x04
    SHOW_MASKS        = 0x08
    SIMPLIFY          = 0x10
    ALIGN             = 0x20
    NUMERIC_IDS       = 0x40


class TextSection(IntFlag):
    """Optional sections found by richacl_from_text()."""
    OWNER_MASK = 0x01
    GROUP_MASK = 0x02
    OTHER_MASK = 0x04
    FLAGS      = 0x08


class Context(IntFlag):
    """Which object kind a mask table row applies to."""
    FILE      = 0x01
    DIRECTORY = 0x02
