"""IRCv3 message-tag value unescaping."""

from __future__ import annotations

_ESCAPES = {":": ";", "s": " ", "\\": "\\"}
_CRLF_ESCAPES = {**_ESCAPES, "r": "\r", "n": "\n"}


def decode_tag_value(value: str | None, *, crlf: bool = False) -> str | None:
    """Decode a tag value according to IRCv3 message tags.

    Only ``\\:``, ``\\s`` and ``\\\\`` are decoded unless ``crlf`` is set, in
    which case ``\\r`` and ``\\n`` are decoded as well. Any other backslash
    (including a trailing one) is copied through unchanged.

    Examples:
      "hello\\schat" -> "hello chat"
      "a\\:b" -> "a;b"
      None -> None
    """
    if value is None:
        return None
    if "\\" not in value:
        return value
    table = _CRLF_ESCAPES if crlf else _ESCAPES
    out: list[str] = []
    i = 0
    end = len(value)
    while i < end:
        ch = value[i]
        if ch == "\\" and i + 1 < end:
            replacement = table.get(value[i + 1])
            if replacement is not None:
                out.append(replacement)
                i += 2
                continue
        out.append(ch)
        i += 1
    return "".join(out)


__all__ = ["decode_tag_value"]
