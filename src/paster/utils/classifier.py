from paster.models.card import ContentType

_URL_MARKERS = ("http://", "https://")
_CODE_MARKERS = ("function", "const", "class")


def classify(text: str) -> ContentType:
    """
    Map raw clipboard text to a content type.

    Rules are checked in order and the first match wins: url markers,
    then an angle-bracket pair for html, then code keywords.
    """
    if any(marker in text for marker in _URL_MARKERS):
        return ContentType.URL
    if "<" in text and ">" in text:
        return ContentType.HTML
    if any(marker in text for marker in _CODE_MARKERS):
        return ContentType.CODE
    return ContentType.TEXT
