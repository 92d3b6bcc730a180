from paster.models.card import Card, ContentType

__all__ = [
    'Card',
    'ContentType',
]
