"""Small HTML fragment builders.

Only ``page`` (title) and ``link`` (label) escape their text. Everything
else is wrapped as given, so callers must run untrusted text through
``encode`` first.
"""

from board.escaping import encode


def tag(name: str, content: str) -> str:
    return f"<{name}>{content}</{name}>"


def heading(text: str) -> str:
    return tag("h1", text)


def paragraph(text: str) -> str:
    return tag("p", text)


def unordered_list(items: str) -> str:
    return tag("ul", items)


def list_item(text: str) -> str:
    return tag("li", text)


def strong(text: str) -> str:
    return tag("strong", text)


def small(text: str) -> str:
    return tag("small", text)


def link(href: str, label: str) -> str:
    return f'<a href="{href}">{encode(label)}</a>'


def back_link(href: str) -> str:
    return paragraph(link(href, "← back"))


def combine(sections: list[str]) -> str:
    return "".join(sections)


def page(title: str, body: str) -> str:
    return (
        '<!doctype html><html><head><meta charset="utf-8">'
        f"<title>{encode(title)}</title></head><body>{body}</body></html>"
    )
