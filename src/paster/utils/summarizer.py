TITLE_LIMIT = 30
ELLIPSIS = "..."


def summarize(text: str, limit: int = TITLE_LIMIT) -> str:
    title = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ").strip()
    if len(title) > limit:
        return title[:limit] + ELLIPSIS
    return title
