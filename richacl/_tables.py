# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import NamedTuple

from ._enums import ACLFlag, AceFlag, AceType, Context, Perm


class FlagBit(NamedTuple):
    bit: int
    char: str
    name: str


class MaskBit(NamedTuple):
    bit: int
    char: str
    name: str
    context: Context


_F = Context.FILE
_D = Context.DIRECTORY
_B = Context.FILE | Context.DIRECTORY


# ── tables (row order is output order) ────────────────────────────────────────

ACL_FLAG_BITS = (
    FlagBit(ACLFlag.MASKED,       'm', 'masked'),
    FlagBit(ACLFlag.AUTO_INHERIT, 'a', 'auto_inherit'),
    FlagBit(ACLFlag.PROTECTED,    'p', 'protected'),
    FlagBit(ACLFlag.DEFAULTED,    'd', 'defaulted'),
    FlagBit(ACLFlag.POSIX_MAPPED, 'P', 'posix_mapped'),
)

ACE_FLAG_BITS = (
    FlagBit(AceFlag.FILE_INHERIT,         'f', 'file_inherit'),
    FlagBit(AceFlag.DIRECTORY_INHERIT,    'd', 'dir_inherit'),
    FlagBit(AceFlag.NO_PROPAGATE_INHERIT, 'n', 'no_propagate'),
    FlagBit(AceFlag.INHERIT_ONLY,         'i', 'inherit_only'),
    FlagBit(AceFlag.IDENTIFIER_GROUP,     'g', 'identifier_group'),
    FlagBit(AceFlag.INHERITED,            'a', 'inherited'),
)

ACE_TYPE_STR = {
    AceType.ALLOW: 'allow',
    AceType.DENY:  'deny',
}

# Rows sharing a letter have disjoint contexts.  DELETE_CHILD only means
# something on directories but can be set on files, so it is shown for both.
MASK_BITS = (
    MaskBit(Perm.READ_DATA,            'r', 'read_data',            _F),
    MaskBit(Perm.LIST_DIRECTORY,       'r', 'list_directory',       _D),
    MaskBit(Perm.WRITE_DATA,           'w', 'write_data',           _F),
    MaskBit(Perm.ADD_FILE,             'w', 'add_file',             _D),
    MaskBit(Perm.APPEND_DATA,          'p', 'append_data',          _F),
    MaskBit(Perm.ADD_SUBDIRECTORY,     'p', 'add_subdirectory',     _D),
    MaskBit(Perm.EXECUTE,              'x', 'execute',              _B),
    MaskBit(Perm.DELETE_CHILD,         'd', 'delete_child',         _B),
    MaskBit(Perm.DELETE,               'D', 'delete',               _B),
    MaskBit(Perm.READ_ATTRIBUTES,      'a', 'read_attributes',      _B),
    MaskBit(Perm.WRITE_ATTRIBUTES,     'A', 'write_attributes',     _B),
    MaskBit(Perm.READ_NAMED_ATTRS,     'R', 'read_xattr',           _B),
    MaskBit(Perm.WRITE_NAMED_ATTRS,    'W', 'write_xattr',          _B),
    MaskBit(Perm.READ_ACL,             'c', 'read_acl',             _B),
    MaskBit(Perm.WRITE_ACL,            'C', 'write_acl',            _B),
    MaskBit(Perm.WRITE_OWNER,          'o', 'write_owner',          _B),
    MaskBit(Perm.SYNCHRONIZE,          'S', 'synchronize',          _B),
    MaskBit(Perm.WRITE_RETENTION,      'e', 'write_retention',      _B),
    MaskBit(Perm.WRITE_RETENTION_HOLD, 'E', 'write_retention_hold', _B),
)


# ── reverse lookups for the parser ────────────────────────────────────────────

ACL_FLAG_FROM_NAME = {row.name: int(row.bit) for row in ACL_FLAG_BITS}
ACL_FLAG_FROM_CHAR = {row.char: int(row.bit) for row in ACL_FLAG_BITS}

ACE_FLAG_FROM_NAME = {row.name: int(row.bit) for row in ACE_FLAG_BITS}
ACE_FLAG_FROM_CHAR = {row.char: int(row.bit) for row in ACE_FLAG_BITS}

ACE_TYPE_FROM_STR = {name: ace_type for ace_type, name in ACE_TYPE_STR.items()}

MASK_FROM_NAME = {row.name: int(row.bit) for row in MASK_BITS}
# Letters shared by a file row and a directory row map to the same bit.
MASK_FROM_CHAR = {row.char: int(row.bit) for row in MASK_BITS}
