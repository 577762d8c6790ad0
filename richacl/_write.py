# SPDX-License-Identifier: LGPL-3.0-or-later

from ._enums import AceFlag, Context, POSIX_ALWAYS_ALLOWED, TextFormat
from ._tables import ACE_FLAG_BITS, ACE_TYPE_STR, ACL_FLAG_BITS, MASK_BITS


_CONTEXTS = TextFormat.FILE_CONTEXT | TextFormat.DIRECTORY_CONTEXT


def _join(words, residual, long_form):
    """Join rendered words and append a 0x residual for unconsumed bits."""
    text = ('/' if long_form else '').join(words)
    if residual:
        if words:
            text += '/'
        text += f'0x{residual:x}'
    return text


def _flags_str(value, table, fmt):
    long_form = bool(fmt & TextFormat.LONG)
    value = int(value)
    words = []
    for row in table:
        if not value & row.bit:
            continue
        value &= ~int(row.bit)
        words.append(row.name if long_form else row.char)
    return _join(words, value, long_form)


def acl_flags_str(flags, fmt=TextFormat(0)):
    return _flags_str(flags, ACL_FLAG_BITS, fmt)


def ace_flags_str(flags, fmt=TextFormat(0)):
    # SPECIAL_WHO is carried by the identifier column.
    return _flags_str(int(flags) & ~int(AceFlag.SPECIAL_WHO),
                      ACE_FLAG_BITS, fmt)


def ace_type_str(ace_type):
    return ACE_TYPE_STR.get(ace_type, str(int(ace_type)))


def mask_str(mask, fmt=TextFormat(0)):
    """Render an access mask.

    Short form ignores the requested contexts and always uses the file
    context, so that no letter is written twice.  Long form with no
    context requested names both the file and the directory permission.
    With ALIGN, short form writes '-' for every file row that is not set.
    With SIMPLIFY, permissions in POSIX_ALWAYS_ALLOWED are never shown.
    Bits without a table row end up in a trailing 0x residual.
    """
    fmt = TextFormat(fmt)
    long_form = bool(fmt & TextFormat.LONG)
    if not long_form:
        fmt = TextFormat((int(fmt) & ~int(TextFormat.DIRECTORY_CONTEXT)) |
                         TextFormat.FILE_CONTEXT)
    elif not fmt & _CONTEXTS:
        fmt |= _CONTEXTS

    mask = int(mask)
    file_mask = mask if fmt & TextFormat.FILE_CONTEXT else 0
    dir_mask = mask if fmt & TextFormat.DIRECTORY_CONTEXT else 0
    align = not long_form and bool(fmt & TextFormat.ALIGN)
    simplify = bool(fmt & TextFormat.SIMPLIFY)

    words = []
    for row in MASK_BITS:
        found = False
        if file_mask & row.bit and row.context & Context.FILE:
            file_mask &= ~int(row.bit)
            found = True
        if dir_mask & row.bit and row.context & Context.DIRECTORY:
            dir_mask &= ~int(row.bit)
            found = True

        if simplify and row.bit & POSIX_ALWAYS_ALLOWED:
            continue

        if found:
            words.append(row.name if long_form else row.char)
        elif align and row.context & Context.FILE:
            words.append('-')

    return _join(words, file_mask | dir_mask, long_form)


def richacl_mask_to_text(mask, fmt=TextFormat(0)) -> str:
    """Render a single access mask the same way richacl_to_text() does."""
    return mask_str(mask, fmt)
