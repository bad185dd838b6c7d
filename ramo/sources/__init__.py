from typing import Optional

from ramo.config import Settings
from .base import FieldRecord, FieldSource
from .file import FileFieldSource
from .http import HttpFieldSource

SOURCES = [
    HttpFieldSource,
    FileFieldSource,
]


def detect_source(target: str, settings: Optional[Settings] = None) -> Optional[FieldSource]:
    """Returns the source able to read the target, or None."""
    settings = settings or Settings()

    for source in SOURCES:
        if source.detect(target):
            if source is HttpFieldSource:
                return HttpFieldSource(target, timeout=settings.timeout)
            return source(target)

    return None
