"""HTML escaping for untrusted text."""

from markupsafe import escape


def encode(text: str | None) -> str:
    """Escape text for embedding inside HTML element content.

    Replaces ``& < > " '`` with character references and passes everything
    else through. ``None`` becomes an empty string.
    """
    if text is None:
        return ""
    return str(escape(str(text)))
