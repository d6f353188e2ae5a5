"""Regular expressions that find URLs in plain text.

Every pattern returns the leftmost match and, among matches starting there,
the longest one.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

import regex

from .schemes import SCHEMES_NO_AUTHORITY, STD_SCHEMES
from .tlds import PSEUDO_TLDS, TLDS

__all__ = [
    "RELAXED",
    "STRICT",
    "KNOWN_SCHEMES_RELAXED",
    "KNOWN_SCHEMES_STRICT",
    "tld_alternation",
    "scheme_alternation",
    "strict_matching_scheme",
]

# Leftmost-longest semantics; V0 keeps "|", "&" and "~" literal in sets.
_FLAGS = regex.V0 | regex.POSIX


def _to_ascii(label: str) -> str:
    """Return the punycode form of a non-ASCII label, or the label itself."""
    if label.isascii():
        return label
    return "xn--" + label.encode("punycode").decode("ascii")


def tld_alternation(tlds: Iterable[str], pseudo_tlds: Iterable[str]) -> str:
    """Build a case-insensitive pattern matching any of the given TLDs.

    Non-ASCII domains are also accepted in their punycode form. A TLD that
    appears twice raises ValueError.
    """
    seen: set[str] = set()

    def add(tld: str) -> None:
        if tld in seen:
            raise ValueError(f"duplicate TLD: {tld}")
        seen.add(tld)

    for tld in chain(tlds, pseudo_tlds):
        add(tld)
        ascii_tld = _to_ascii(tld)
        if ascii_tld != tld:
            add(ascii_tld)
    return "(?i:(?:" + "|".join(sorted(seen)) + "))"


def scheme_alternation(schemes: Iterable[str]) -> str:
    """Build a case-insensitive pattern matching any scheme followed by ':'.

    Entries are used as pattern fragments just as they are listed.
    """
    return "(?i:(?:" + "|".join(schemes) + ")):"


_WORD = "[0-9A-Za-z_]"
_BOUNDARY = f"(?:(?<={_WORD})(?!{_WORD})|(?<!{_WORD})(?={_WORD}))"

_IRI_CHAR = r"\p{L}\p{M}\p{N}"
_END_CHAR = _IRI_CHAR + r"/\-+_&~*%=#\p{Sc}\p{So}"
_MID_CHAR = _END_CHAR + r"\|\p{Po}"


def _well_balanced(opening: str, closing: str) -> str:
    mid = f"[{_MID_CHAR}]*"
    return f"{opening}{mid}(?:{opening}{mid}{closing}{mid})*{closing}"


_WELL_ALL = "|".join(
    (
        _well_balanced(r"\(", r"\)"),
        _well_balanced(r"\[", r"\]"),
        _well_balanced(r"\{", r"\}"),
    )
)
_PATH_CONT = f"(?:[{_MID_CHAR}]|{_WELL_ALL})*(?:{_WELL_ALL}|[{_END_CHAR}])"

_COM_SCHEME = r"[a-zA-Z][a-zA-Z.\-+]*://"
_OTHER_SCHEME = scheme_alternation(SCHEMES_NO_AUTHORITY)
_STD_SCHEMES = scheme_alternation(STD_SCHEMES)
_SCHEME = f"(?:{_COM_SCHEME}|{_OTHER_SCHEME})"
_STD_SCHEME = f"(?:{_STD_SCHEMES}|{_OTHER_SCHEME})"
_GTLD = tld_alternation(TLDS, PSEUDO_TLDS)

_IRI = f"[{_IRI_CHAR}](?:[{_IRI_CHAR}\\-]*[{_IRI_CHAR}])?"
_DOMAIN = f"(?:{_IRI}\\.)+"
_OCTET = "(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"
_IPV4_ADDR = _BOUNDARY + r"\.".join([_OCTET] * 4) + _BOUNDARY

_H4 = "[0-9a-fA-F]{1,4}"
_V4_BYTE = "(?:25[0-5]|(?:2[0-4]|1[0-9]|[1-9])?[0-9])"
_IPV6_ADDR = (
    "(?:" + _H4 + ":(?:" + _H4 + ":(?:" + _H4 + ":(?:" + _H4 + ":"
    "(?:" + _H4 + ":[0-9a-fA-F]{0,4}|:" + _H4 + ")?"
    "|(?::" + _H4 + "){0,2})"
    "|(?::" + _H4 + "){0,3})"
    "|(?::" + _H4 + "){0,4})"
    "|:(?::" + _H4 + "){0,5})"
    "(?:(?::" + _H4 + "){2}|:" + _V4_BYTE + r"(?:\." + _V4_BYTE + "){3})"
    "|(?:(?:" + _H4 + ":){1,6}|:):" + _H4 +
    "|(?:" + _H4 + ":){7}:"
)
_IP_ADDR = f"(?:{_IPV4_ADDR}|{_IPV6_ADDR})"

_SITE = _DOMAIN + _GTLD
_HOST_NAME = f"(?:{_SITE}|{_IP_ADDR})"
_PORT = "(?::[0-9]*)?"
_PATH = f"(?:/(?:{_PATH_CONT})?|{_BOUNDARY}|\\Z)"
_WEB_URL = _HOST_NAME + _PORT + _PATH

_STRICT = f"(?:{_BOUNDARY}{_SCHEME}{_PATH_CONT})"
_RELAXED = f"(?:{_STRICT}|{_WEB_URL})"
_KNOWN_SCHEMES_STRICT = f"(?:{_STD_SCHEME}{_PATH_CONT})"
_KNOWN_SCHEMES_RELAXED = f"(?:{_KNOWN_SCHEMES_STRICT}|{_WEB_URL})"

#: Matches every URL it can find, with or without a scheme.
RELAXED = regex.compile(_RELAXED, _FLAGS)
#: Matches only URLs that carry a scheme, to avoid false positives.
STRICT = regex.compile(_STRICT, _FLAGS)
#: Like RELAXED, but schemes must be registered ones.
KNOWN_SCHEMES_RELAXED = regex.compile(_KNOWN_SCHEMES_RELAXED, _FLAGS)
#: Like STRICT, but schemes must be registered ones.
KNOWN_SCHEMES_STRICT = regex.compile(_KNOWN_SCHEMES_STRICT, _FLAGS)


def strict_matching_scheme(exp: str):
    """Compile a pattern like STRICT whose scheme matches the expression *exp*.

    The scheme is matched case-insensitively. An invalid expression raises
    ValueError.
    """
    pattern = f"(?:{_BOUNDARY}(?i:(?:{exp})){_PATH_CONT})"
    try:
        return regex.compile(pattern, _FLAGS)
    except regex.error as err:
        raise ValueError(f"invalid scheme expression {exp!r}: {err}") from err