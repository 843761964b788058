"""
Noteful Backend — Text Sanitizer
==================================

What:  Neutralizes markup in untrusted text before it is stored or returned.
How:   Encodes the two markup delimiters, `<` → `&lt;` and `>` → `&gt;`.
       Without a literal `<` no tag, inline event handler or style block can
       open, so the output is inert in any HTML renderer. Every other
       character (quotes, ampersands, existing entities) is kept byte-for-byte.
Who:   ResourceController, on the write path and again on the read path.

Idempotence:
    The replacements only introduce `&`, letters and `;`, none of which is
    rewritten, so sanitize(sanitize(x)) == sanitize(x). Rows written before
    sanitization existed are therefore safe to sanitize on every read.

Example:
    >>> sanitize('Naughty <script>alert("xss");</script>')
    'Naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
"""

from typing import Any, Dict, Iterable, Mapping

_MARKUP_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def sanitize(value: Any) -> Any:
    """
    Return `value` with markup delimiters encoded.

    None and non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    return value.translate(_MARKUP_ESCAPES)


def sanitize_fields(record: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Return a copy of `record` with the named text fields sanitized.

    Fields absent from the record are skipped; key order is preserved.
    """
    result = dict(record)
    for field in fields:
        if field in result:
            result[field] = sanitize(result[field])
    return result
