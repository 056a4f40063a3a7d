"""Page sections for the comment board.

Values handed to these helpers as "already encoded" must have gone through
``encode`` at the call site. Only link labels and page titles are escaped
here, by the markup builders themselves.
"""

from board.escaping import encode
from board.markup import (
    back_link,
    combine,
    heading,
    link,
    list_item,
    page,
    paragraph,
    small,
    strong,
    unordered_list,
)
from board.models import Comment

SEARCH_ITEM_COUNT = 5


def layout(title: str, sections: list[str]) -> str:
    return page(title, combine(sections))


def home_sections(prefix: str) -> list[str]:
    return [
        heading("Assignment: Comment Board"),
        paragraph("This board accepts author &amp; text."),
        paragraph("Use the list endpoint to view recent comments."),
        unordered_list(
            list_item(link(f"{prefix}/list", f"GET {prefix}/list"))
            + list_item(link(f"{prefix}/comment", f"POST {prefix}/comment"))
            + list_item(link(f"{prefix}/search?q=hello", f"GET {prefix}/search?q=..."))
            + list_item(
                link(f"{prefix}/userByEmail?email=test@example.com", f"GET {prefix}/userByEmail")
            )
        ),
    ]


def thank_you_sections(prefix: str, title: str, message: str) -> list[str]:
    """Confirmation after a comment is posted. title and message are already encoded."""
    return [
        heading(title),
        paragraph("You posted:"),
        paragraph(message),
        paragraph(link(f"{prefix}/list", "View all comments")),
        back_link(prefix or "/"),
    ]


def render_items(query: str) -> str:
    """Placeholder result items for an already encoded query."""
    return "".join(
        list_item(f"Item {i} (query: '{query}')") for i in range(1, SEARCH_ITEM_COUNT + 1)
    )


def search_sections(prefix: str, query: str, items: str) -> list[str]:
    return [
        heading(f"Results for: {query}"),
        paragraph("Matching items:"),
        unordered_list(items),
        back_link(prefix or "/"),
    ]


def notice_sections(prefix: str, title: str, message: str) -> list[str]:
    return [heading(title), paragraph(message), back_link(prefix or "/")]


def comment_items(comments: list[Comment]) -> str:
    # Timestamps are generated server-side and need no escaping
    return "".join(
        list_item(
            f"{strong(encode(c.author))}: {encode(c.text)} "
            f"{small('(' + c.submitted_at.isoformat() + ')')}"
        )
        for c in comments
    )


def comment_list_sections(prefix: str, comments: list[Comment]) -> list[str]:
    return [heading("Comments"), unordered_list(comment_items(comments)), back_link(prefix or "/")]


def not_found_sections(prefix: str, path: str) -> list[str]:
    return [
        heading("404 Not Found"),
        paragraph(f"No route for: {encode(path)}"),
        back_link(prefix or "/"),
    ]
