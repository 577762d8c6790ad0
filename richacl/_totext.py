# SPDX-License-Identifier: LGPL-3.0-or-later

from ._enums import AceFlag, Context, SpecialWho, TextFormat
from ._resolver import DEFAULT_RESOLVER, IdentityResolver
from ._tables import ACE_FLAG_BITS, ACL_FLAG_BITS, MASK_BITS
from ._write import (
    ace_flags_str, ace_type_str, acl_flags_str, mask_str,
)


_CONTEXTS = TextFormat.FILE_CONTEXT | TextFormat.DIRECTORY_CONTEXT

# Keywords that share the identifier column with entries.
_KEYWORD_WIDTH = len('flags') + 1


def _special_who_str(who):
    return who.name.lower() + '@'


def _who_str(ace, numeric, resolver):
    if isinstance(ace.who, SpecialWho):
        return _special_who_str(ace.who)
    name = None
    if not numeric:
        if ace.is_group:
            name = resolver.group_name(ace.who)
        else:
            name = resolver.user_name(ace.who)
    return name if name is not None else str(ace.who)


def _align_width(acl, whos, fmt):
    """Width every identifier is right-justified to so that the first ':'
    of every line lands in the same column."""
    if not fmt & TextFormat.ALIGN:
        return 0
    width = 0
    if acl.flags or fmt & TextFormat.SHOW_MASKS:
        width = _KEYWORD_WIDTH
    for who in whos:
        if len(who) >= width:
            width = len(who) + 1
    return width


def _ace_fmt(ace, fmt):
    if ace.flags & AceFlag.INHERIT_ONLY:
        fmt = TextFormat(int(fmt) & ~int(_CONTEXTS))
    if ace.flags & AceFlag.FILE_INHERIT:
        fmt |= TextFormat.FILE_CONTEXT
    if ace.flags & AceFlag.DIRECTORY_INHERIT:
        fmt |= TextFormat.DIRECTORY_CONTEXT
    return fmt


def _mask_lines(acl, fmt, width):
    mask_fmt = fmt
    allowed = 0
    for ace in acl.aces:
        if ace.is_inherit_only:
            continue
        if ace.is_allow:
            allowed |= int(ace.mask)
        if ace.flags & AceFlag.FILE_INHERIT:
            mask_fmt |= TextFormat.FILE_CONTEXT
        if ace.flags & AceFlag.DIRECTORY_INHERIT:
            mask_fmt |= TextFormat.DIRECTORY_CONTEXT
    if not fmt & TextFormat.SIMPLIFY:
        allowed = ~0

    lines = []
    for who, mask in (('owner', acl.owner_mask),
                      ('group', acl.group_mask),
                      ('other', acl.other_mask)):
        perms = mask_str(int(mask) & allowed, mask_fmt)
        lines.append(f'{who.rjust(width)}:{perms}::mask')
    return lines


def richacl_to_text(
    acl,
    fmt=TextFormat(0),
    resolver: IdentityResolver | None = None,
) -> str:
    """Return the text form of acl, one newline-terminated line per entry.

    An optional 'flags:' line comes first, then the owner/group/other mask
    lines when SHOW_MASKS is set, then the entries in order.
    """
    if resolver is None:
        resolver = DEFAULT_RESOLVER
    fmt = TextFormat(fmt)
    numeric = bool(fmt & TextFormat.NUMERIC_IDS)

    # Resolve once; the alignment pass and the output must agree.
    whos = [_who_str(ace, numeric, resolver) for ace in acl.aces]
    width = _align_width(acl, whos, fmt)

    lines = []
    if acl.flags:
        lines.append(f'{"flags".rjust(width)}:{acl_flags_str(acl.flags, fmt)}')
    if fmt & TextFormat.SHOW_MASKS:
        lines.extend(_mask_lines(acl, fmt, width))

    for who, ace in zip(whos, acl.aces):
        ace_fmt = _ace_fmt(ace, fmt)
        perms = mask_str(ace.mask, ace_fmt)
        flags = ace_flags_str(ace.flags, ace_fmt)
        atype = ace_type_str(ace.type)
        lines.append(f'{who.rjust(width)}:{perms}:{flags}:{atype}')

    return ''.join(f'{line}\n' for line in lines)


# ── structured rendering ──────────────────────────────────────────────────────

# One name per bit: the file meaning of bits shared with directories.
_FILE_MASK_BITS = tuple(row for row in MASK_BITS if row.context & Context.FILE)


def _names(value, table):
    value = int(value)
    names = []
    for row in table:
        if value & row.bit:
            value &= ~int(row.bit)
            names.append(row.name)
    if value:
        names.append(f'0x{value:x}')
    return names


def _mask_names(mask):
    return _names(mask, _FILE_MASK_BITS)


def _ace_to_dict(ace, numeric, resolver):
    return {
        'who': _who_str(ace, numeric, resolver),
        'special': ace.is_special,
        'group': ace.is_group,
        'perms': _mask_names(ace.mask),
        'flags': _names(int(ace.flags) & ~int(AceFlag.SPECIAL_WHO),
                        ACE_FLAG_BITS),
        'type': ace_type_str(ace.type),
    }


def richacl_to_dict(
    acl,
    numeric=False,
    resolver: IdentityResolver | None = None,
) -> dict:
    """Return acl as a JSON-serialisable dict of mnemonic name lists."""
    if resolver is None:
        resolver = DEFAULT_RESOLVER
    return {
        'acl_flags': _names(acl.flags, ACL_FLAG_BITS),
        'owner_mask': _mask_names(acl.owner_mask),
        'group_mask': _mask_names(acl.group_mask),
        'other_mask': _mask_names(acl.other_mask),
        'aces': [_ace_to_dict(ace, numeric, resolver) for ace in acl.aces],
    }
