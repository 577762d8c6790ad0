# SPDX-License-Identifier: LGPL-3.0-or-later

import dataclasses
from typing import Iterable

from ._enums import ACLFlag, AceFlag, AceType, Perm, SpecialWho


_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


def _check_range(value, limit, what):
    if not 0 <= value <= limit:
        raise ValueError(f'{what} out of range: {value!r}')


def _ace_type(value):
    """Return the AceType member for value, or value itself if unknown."""
    try:
        return AceType(value)
    except ValueError:
        return int(value)


@dataclasses.dataclass(frozen=True, slots=True)
class RichAce:
    """Rich ACL entry.

    Fields: type (AceType, or int for unknown types), flags (AceFlag),
    mask (Perm), who (SpecialWho, or a uid/gid).  A numeric who is a gid
    when flags has IDENTIFIER_GROUP.  SPECIAL_WHO in flags always follows
    the kind of who.
    """
    type: AceType | int
    flags: AceFlag
    mask: Perm
    who: SpecialWho | int

    def __post_init__(self):
        _check_range(int(self.type), _UINT16_MAX, 'entry type')
        _check_range(int(self.flags), _UINT16_MAX, 'entry flag')
        _check_range(int(self.mask), _UINT32_MAX, 'access mask')
        flags = int(self.flags)
        if isinstance(self.who, SpecialWho):
            flags |= AceFlag.SPECIAL_WHO
        else:
            _check_range(self.who, _UINT32_MAX, 'identifier')
            object.__setattr__(self, 'who', int(self.who))
            flags &= ~int(AceFlag.SPECIAL_WHO)
        object.__setattr__(self, 'flags', AceFlag(flags))
        object.__setattr__(self, 'mask', Perm(self.mask))
        object.__setattr__(self, 'type', _ace_type(self.type))

    @property
    def is_special(self) -> bool:
        return isinstance(self.who, SpecialWho)

    @property
    def is_group(self) -> bool:
        return bool(self.flags & AceFlag.IDENTIFIER_GROUP)

    @property
    def is_inherit_only(self) -> bool:
        return bool(self.flags & AceFlag.INHERIT_ONLY)

    @property
    def is_allow(self) -> bool:
        return self.type == AceType.ALLOW


@dataclasses.dataclass(frozen=True, slots=True)
class RichACL:
    """Rich ACL value.

    aces keeps evaluation order.  owner_mask, group_mask and other_mask are
    the POSIX-mapped file masks; they are written as MASK lines, never as
    entries.
    """
    aces: tuple[RichAce, ...] = ()
    flags: ACLFlag = ACLFlag(0)
    owner_mask: Perm = Perm(0)
    group_mask: Perm = Perm(0)
    other_mask: Perm = Perm(0)

    def __post_init__(self):
        _check_range(int(self.flags), _UINT8_MAX, 'acl flag')
        object.__setattr__(self, 'aces', tuple(self.aces))
        object.__setattr__(self, 'flags', ACLFlag(self.flags))
        for name in ('owner_mask', 'group_mask', 'other_mask'):
            mask = int(getattr(self, name))
            _check_range(mask, _UINT32_MAX, 'access mask')
            object.__setattr__(self, name, Perm(mask))

    @classmethod
    def from_aces(
        cls,
        aces: Iterable[RichAce],
        flags: ACLFlag = ACLFlag(0),
    ) -> 'RichACL':
        return cls(aces=tuple(aces), flags=flags)

    def __len__(self):
        return len(self.aces)
