# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Tests for the RichAce / RichACL value types and the bit tables.
"""

import dataclasses

import pytest

from richacl import (
    ACLFlag,
    AceFlag,
    AceType,
    Context,
    Perm,
    RichACL,
    RichAce,
    SpecialWho,
    TextFormat,
    richacl_from_text,
    richacl_to_text,
)
from richacl._tables import (
    ACE_FLAG_BITS,
    ACL_FLAG_BITS,
    MASK_BITS,
    MASK_FROM_CHAR,
    MASK_FROM_NAME,
)


_RWX = Perm.READ_DATA | Perm.WRITE_DATA | Perm.EXECUTE


# ── enum values ───────────────────────────────────────────────────────────────

def test_acl_flag_values():
    assert ACLFlag.AUTO_INHERIT == 0x01
    assert ACLFlag.PROTECTED    == 0x02
    assert ACLFlag.DEFAULTED    == 0x04
    assert ACLFlag.POSIX_MAPPED == 0x10
    assert ACLFlag.MASKED       == 0x80


def test_ace_flag_values():
    assert AceFlag.FILE_INHERIT     == 0x001
    assert AceFlag.INHERIT_ONLY     == 0x008
    assert AceFlag.IDENTIFIER_GROUP == 0x040
    assert AceFlag.INHERITED        == 0x080
    assert AceFlag.SPECIAL_WHO      == 0x100


def test_perm_directory_aliases():
    assert Perm.LIST_DIRECTORY   == Perm.READ_DATA
    assert Perm.ADD_FILE         == Perm.WRITE_DATA
    assert Perm.ADD_SUBDIRECTORY == Perm.APPEND_DATA


def test_perm_keeps_unknown_bits():
    assert int(Perm(0x800 | Perm.READ_DATA)) == 0x801


# ── tables ────────────────────────────────────────────────────────────────────

def test_mask_letters_unique_per_context():
    for ctx in (Context.FILE, Context.DIRECTORY):
        chars = [row.char for row in MASK_BITS if row.context & ctx]
        assert len(chars) == len(set(chars)), ctx


def test_mask_shared_letters_have_same_bit():
    for row in MASK_BITS:
        assert MASK_FROM_CHAR[row.char] == row.bit


def test_mask_names_unique():
    assert len(MASK_FROM_NAME) == len(MASK_BITS)


def test_mask_every_bit_has_file_row():
    file_bits = 0
    all_bits = 0
    for row in MASK_BITS:
        all_bits |= row.bit
        if row.context & Context.FILE:
            file_bits |= row.bit
    assert file_bits == all_bits


def test_flag_tables_unique():
    for table in (ACL_FLAG_BITS, ACE_FLAG_BITS):
        assert len({row.char for row in table}) == len(table)
        assert len({row.name for row in table}) == len(table)
        assert len({row.bit for row in table}) == len(table)


def test_flag_table_mnemonics_lowercase():
    for table in (ACL_FLAG_BITS, ACE_FLAG_BITS, MASK_BITS):
        for row in table:
            assert row.name == row.name.lower()


# ── RichAce ───────────────────────────────────────────────────────────────────

def test_ace_special_who_sets_flag():
    ace = RichAce(AceType.ALLOW, AceFlag(0), _RWX, SpecialWho.OWNER)
    assert ace.flags == AceFlag.SPECIAL_WHO
    assert ace.is_special


def test_ace_numeric_who_clears_special_flag():
    ace = RichAce(AceType.ALLOW, AceFlag.SPECIAL_WHO | AceFlag.FILE_INHERIT,
                  _RWX, 1000)
    assert ace.flags == AceFlag.FILE_INHERIT
    assert not ace.is_special


def test_ace_group_flag():
    ace = RichAce(AceType.DENY, AceFlag.IDENTIFIER_GROUP, _RWX, 50)
    assert ace.is_group
    assert not ace.is_allow


def test_ace_known_type_becomes_enum():
    ace = RichAce(1, AceFlag(0), _RWX, 1000)
    assert ace.type is AceType.DENY


def test_ace_unknown_type_stays_int():
    ace = RichAce(7, AceFlag(0), _RWX, 1000)
    assert ace.type == 7
    assert not isinstance(ace.type, AceType)


def test_ace_plain_ints_coerced():
    ace = RichAce(0, 0x3, 0x23, 1000)
    assert isinstance(ace.flags, AceFlag)
    assert isinstance(ace.mask, Perm)
    assert ace.mask == _RWX


@pytest.mark.parametrize('who', [-1, 2 ** 32])
def test_ace_who_out_of_range(who):
    with pytest.raises(ValueError, match='identifier out of range'):
        RichAce(AceType.ALLOW, AceFlag(0), _RWX, who)


@pytest.mark.parametrize('atype, flags, mask, what', [
    (0x10000, 0,       0,       'entry type'),
    (-1,      0,       0,       'entry type'),
    (0,       0x10000, 0,       'entry flag'),
    (0,       -1,      0,       'entry flag'),
    (0,       0,       2 ** 32, 'access mask'),
    (0,       0,       -1,      'access mask'),
])
def test_ace_field_out_of_range(atype, flags, mask, what):
    with pytest.raises(ValueError, match=f'{what} out of range'):
        RichAce(atype, flags, mask, SpecialWho.OWNER)


def test_ace_field_widest_values():
    ace = RichAce(0xFFFF, 0xFFFF, 0xFFFFFFFF, 0xFFFFFFFF)
    assert ace.type == 0xFFFF
    assert int(ace.flags) == 0xFFFF & ~int(AceFlag.SPECIAL_WHO)
    assert int(ace.mask) == 0xFFFFFFFF


def test_ace_inherit_only():
    ace = RichAce(AceType.ALLOW, AceFlag.INHERIT_ONLY, _RWX, SpecialWho.EVERYONE)
    assert ace.is_inherit_only


def test_ace_is_frozen():
    ace = RichAce(AceType.ALLOW, AceFlag(0), _RWX, 1000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ace.mask = Perm(0)


# ── RichACL ───────────────────────────────────────────────────────────────────

def test_acl_defaults():
    acl = RichACL()
    assert acl.aces == ()
    assert acl.flags == 0
    assert acl.owner_mask == acl.group_mask == acl.other_mask == 0
    assert len(acl) == 0


def test_acl_from_aces_keeps_order():
    aces = [
        RichAce(AceType.DENY,  AceFlag(0), Perm.WRITE_DATA, SpecialWho.EVERYONE),
        RichAce(AceType.ALLOW, AceFlag(0), _RWX,            SpecialWho.OWNER),
    ]
    acl = RichACL.from_aces(aces, ACLFlag.PROTECTED)
    assert acl.aces == tuple(aces)
    assert acl.flags == ACLFlag.PROTECTED
    assert len(acl) == 2


def test_acl_list_aces_become_tuple():
    ace = RichAce(AceType.ALLOW, AceFlag(0), _RWX, SpecialWho.OWNER)
    acl = RichACL(aces=[ace], owner_mask=0x23)
    assert acl.aces == (ace,)
    assert isinstance(acl.owner_mask, Perm)


@pytest.mark.parametrize('kwargs, what', [
    ({'flags': 0x100},          'acl flag'),
    ({'flags': -1},             'acl flag'),
    ({'owner_mask': 2 ** 32},   'access mask'),
    ({'group_mask': -1},        'access mask'),
    ({'other_mask': 2 ** 40},   'access mask'),
])
def test_acl_field_out_of_range(kwargs, what):
    with pytest.raises(ValueError, match=f'{what} out of range'):
        RichACL(**kwargs)


def test_acl_widest_values_survive_text(resolver):
    acl = RichACL(
        aces=(RichAce(0xFFFF, 0xFFFF, 0xFFFFFFFF, SpecialWho.OWNER),),
        flags=0xFF,
        owner_mask=0xFFFFFFFF,
    )
    text = richacl_to_text(acl, TextFormat.SHOW_MASKS, resolver)
    assert richacl_from_text(text, resolver=resolver).acl == acl


def test_acl_equality():
    ace = RichAce(AceType.ALLOW, AceFlag(0), _RWX, SpecialWho.OWNER)
    assert RichACL.from_aces([ace]) == RichACL.from_aces([ace])
    assert RichACL.from_aces([ace]) != RichACL.from_aces([ace], ACLFlag.MASKED)
