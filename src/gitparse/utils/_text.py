"""Text helpers shared by the output parsers."""

from typing import Final

# Single-character escapes used by the tool when it quotes a path.
_SIMPLE_ESCAPES: Final = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


def unquote_path(raw: str) -> str:
    """Undo the tool's C-style quoting of a path.

    Paths containing control characters, quotes, backslashes or (by default)
    non-ASCII bytes are printed wrapped in double quotes, with octal escapes
    for raw bytes. Unquoted input is returned unchanged.

    Args:
        raw: A path as printed by the tool.

    Returns:
        The decoded path.

    Raises:
        ValueError: If a quoted path is unterminated or has a bad escape.
    """
    if len(raw) < 2 or not (raw.startswith('"') and raw.endswith('"')):  # noqa: PLR2004
        return raw

    body = raw[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\":
            out.extend(char.encode("utf-8"))
            i += 1
            continue
        if i + 1 >= len(body):
            msg = f"Dangling escape in quoted path: {raw!r}"
            raise ValueError(msg)
        nxt = body[i + 1]
        if nxt in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        elif nxt in "01234567":
            octal = body[i + 1 : i + 4]
            if len(octal) != 3 or any(c not in "01234567" for c in octal):  # noqa: PLR2004
                msg = f"Bad octal escape in quoted path: {raw!r}"
                raise ValueError(msg)
            out.append(int(octal, 8))
            i += 4
        else:
            msg = f"Unknown escape \\{nxt} in quoted path: {raw!r}"
            raise ValueError(msg)

    return out.decode("utf-8", errors="surrogateescape")


def split_quoted_pair(text: str) -> tuple[str, str] | None:
    """Split ``"a/x" "b/y"`` style text into its two quoted tokens.

    Either token may be unquoted. Returns None when the text is not made of
    exactly two tokens of which at least one is quoted.
    """
    tokens: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == " ":
            i += 1
            continue
        if text[i] == '"':
            j = i + 1
            while j < len(text):
                if text[j] == "\\":
                    j += 2
                    continue
                if text[j] == '"':
                    break
                j += 1
            if j >= len(text):
                return None
            tokens.append(text[i : j + 1])
            i = j + 1
        else:
            j = text.find(" ", i)
            if j == -1:
                j = len(text)
            tokens.append(text[i:j])
            i = j
    if len(tokens) != 2 or not any(t.startswith('"') for t in tokens):  # noqa: PLR2004
        return None
    return tokens[0], tokens[1]
