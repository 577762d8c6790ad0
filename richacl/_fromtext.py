# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
import re
from typing import Callable, NamedTuple

from ._acl import RichACL, RichAce
from ._enums import ACLFlag, AceFlag, Perm, SpecialWho, TextSection
from ._errors import (
    ACLTextError,
    MalformedEntryError,
    UnknownTokenError,
    UnresolvableIdentifierError,
)
from ._resolver import DEFAULT_RESOLVER, IdentityResolver
from ._tables import (
    ACE_FLAG_FROM_CHAR, ACE_FLAG_FROM_NAME,
    ACE_TYPE_FROM_STR,
    ACL_FLAG_FROM_CHAR, ACL_FLAG_FROM_NAME,
    MASK_FROM_CHAR, MASK_FROM_NAME,
)


logger = logging.getLogger(__name__)

_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF

# 0x hex, leading-zero octal, or decimal; nothing else counts as a number.
_NUMBER_RE = re.compile(r'0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*')

_SPECIAL_WHO_FROM_STR = {w.name.lower() + '@': w for w in SpecialWho}

_MASK_LINE_SECTIONS = {
    'owner': TextSection.OWNER_MASK,
    'group': TextSection.GROUP_MASK,
    'other': TextSection.OTHER_MASK,
}


class ParseResult(NamedTuple):
    acl: RichACL
    sections: TextSection   # optional sections present in the text


# ── entry text splitting ──────────────────────────────────────────────────────

def _split_entries(text):
    """Split text into entries at commas and whitespace.

    Lines starting with '#' (getfacl-style headers) are skipped.
    """
    result = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        result.extend(line.replace(',', ' ').split())
    return result


# ── field decoders ────────────────────────────────────────────────────────────

def _parse_number(s):
    """Return the value of a numeric literal, or None if s is not one."""
    if not _NUMBER_RE.fullmatch(s):
        return None
    if s[:2] in ('0x', '0X'):
        return int(s, 16)
    if s.startswith('0'):
        return int(s, 8)
    return int(s)


def _parse_bits(s, from_name, from_char, limit, what, dashes=False):
    """Decode a '/'-separated list of numbers, mnemonics or letter runs."""
    value = 0
    for tok in s.split('/'):
        if not tok:
            continue

        n = _parse_number(tok)
        if n is not None:
            if n > limit:
                raise UnknownTokenError(f'{what} out of range: {tok!r}')
            value |= n
            continue

        bit = from_name.get(tok.lower())
        if bit is not None:
            value |= bit
            continue

        for ch in tok:
            if dashes and ch == '-':
                continue
            if ch not in from_char:
                raise UnknownTokenError(f'invalid {what} {ch!r} in {tok!r}')
            value |= from_char[ch]
    return value


def _parse_acl_flags(s):
    return ACLFlag(_parse_bits(s, ACL_FLAG_FROM_NAME, ACL_FLAG_FROM_CHAR,
                               _UINT8_MAX, 'acl flag'))


def _parse_ace_flags(s):
    return AceFlag(_parse_bits(s, ACE_FLAG_FROM_NAME, ACE_FLAG_FROM_CHAR,
                               _UINT16_MAX, 'entry flag'))


def _parse_mask(s):
    return Perm(_parse_bits(s, MASK_FROM_NAME, MASK_FROM_CHAR,
                            _UINT32_MAX, 'access mask', dashes=True))


def _parse_type(s):
    n = _parse_number(s)
    if n is not None:
        if n > _UINT16_MAX:
            raise UnknownTokenError(f'entry type out of range: {s!r}')
        return n
    try:
        return ACE_TYPE_FROM_STR[s.lower()]
    except KeyError:
        raise UnknownTokenError(f'invalid entry type: {s!r}') from None


def _parse_who(s, flags, resolver):
    """Decode the identifier field.

    flags must already be decoded: IDENTIFIER_GROUP decides whether a name
    is looked up as a group or as a user.
    """
    at = s.find('@')
    if at >= 0:
        if at != len(s) - 1:
            raise UnresolvableIdentifierError(
                f'domain name not supported: {s!r}')
        try:
            return _SPECIAL_WHO_FROM_STR[s.lower()]
        except KeyError:
            raise UnresolvableIdentifierError(
                f'special identifier not supported: {s!r}') from None

    n = _parse_number(s)
    if n is not None:
        if n > _UINT32_MAX:
            raise UnresolvableIdentifierError(
                f'identifier out of range: {s!r}')
        return n

    if flags & AceFlag.IDENTIFIER_GROUP:
        gid = resolver.group_id(s)
        if gid is None:
            raise UnresolvableIdentifierError(f'unknown group: {s!r}')
        return gid
    uid = resolver.user_id(s)
    if uid is None:
        raise UnresolvableIdentifierError(f'unknown user: {s!r}')
    return uid


# ── parser ────────────────────────────────────────────────────────────────────

def _parse(text, resolver):
    acl_flags = ACLFlag(0)
    masks = {}
    sections = TextSection(0)
    aces = []

    for entry in _split_entries(text):
        fields = entry.split(':')

        if len(fields) == 2 and fields[0].lower() == 'flags':
            acl_flags = _parse_acl_flags(fields[1])
            sections |= TextSection.FLAGS
            continue

        if len(fields) != 4:
            raise MalformedEntryError(f'invalid entry: {entry!r}')
        who_str, mask_str, flags_str, type_str = fields

        mask = _parse_mask(mask_str)
        if type_str.lower() == 'mask':
            section = _MASK_LINE_SECTIONS.get(who_str.lower())
            if section is None:
                raise UnknownTokenError(f'invalid file mask: {who_str!r}')
            masks[section] = mask
            sections |= section
            continue

        ace_flags = _parse_ace_flags(flags_str)
        who = _parse_who(who_str, ace_flags, resolver)
        ace_type = _parse_type(type_str)
        aces.append(RichAce(ace_type, ace_flags, mask, who))

    acl = RichACL(
        aces=tuple(aces),
        flags=acl_flags,
        owner_mask=masks.get(TextSection.OWNER_MASK, Perm(0)),
        group_mask=masks.get(TextSection.GROUP_MASK, Perm(0)),
        other_mask=masks.get(TextSection.OTHER_MASK, Perm(0)),
    )
    return ParseResult(acl, sections)


def richacl_from_text(
    text: str,
    resolver: IdentityResolver | None = None,
    error: Callable[[str], None] | None = None,
) -> ParseResult:
    """Parse the text form of a rich ACL.

    Entries are separated by commas or whitespace and take one of the
    shapes 'flags:<flags>', '<owner|group|other>:<mask>::mask' or
    '<who>:<mask>:<flags>:<type>'.  Mnemonics are case-insensitive and any
    field accepts numeric literals for bits without a mnemonic.

    Parsing stops at the first bad token: the message is passed to error
    (if given) and the matching ACLTextError is raised.  No partial ACL is
    ever returned.

    A line whose first non-blank character is '#' is a comment and is
    skipped as a whole, including any comma-separated entries after the
    '#' on that line.
    """
    if resolver is None:
        resolver = DEFAULT_RESOLVER
    try:
        return _parse(text, resolver)
    except ACLTextError as e:
        logger.debug('rejected ACL text: %s', e)
        if error is not None:
            error(str(e))
        raise


def richacl_mask_from_text(text: str) -> Perm:
    """Decode a standalone access mask such as 'rwx' or 'read_data/0x800'."""
    return _parse_mask(text)
