"""Whitespace and entity helpers shared by the renderer and the lxml adapter."""

# C-locale isspace(): space, \t, \n, \v, \f, \r
ASCII_WHITESPACE = " \t\n\v\f\r"

_ENTITY_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\r": "&#13;",
}


def trim_space(text: str) -> str:
    """Strip leading and trailing ASCII whitespace only.

    Unicode spaces such as U+00A0 are kept, unlike ``str.strip()``.
    """
    return text.strip(ASCII_WHITESPACE)


def encode_entities(text: str) -> str:
    """Re-encode markup characters the way libxml2 does for non-inline text."""
    return "".join(_ENTITY_MAP.get(ch, ch) for ch in text)
