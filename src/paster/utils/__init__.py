from paster.utils.classifier import classify
from paster.utils.fingerprint import fingerprint
from paster.utils.summarizer import summarize

__all__ = [
    'classify',
    'fingerprint',
    'summarize',
]
