import logging
import os
from typing import Optional

from ramo.core.errors import FieldFetchError
from ramo.sources.base import FieldRecord, FieldSource


class FileFieldSource(FieldSource):
    @property
    def name(self) -> str:
        return "File"

    @classmethod
    def detect(cls, target: str) -> bool:
        return os.path.isfile(target)

    async def fetch(self, field_name: Optional[str]) -> FieldRecord:
        logging.info(f"Reading {self.target} (field: {field_name or 'whole document'})")
        try:
            with open(self.target, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"File Error: {e}")
            raise FieldFetchError(f"Failed to load field '{field_name}': {e}") from e

        return self.extract_field(text, field_name)
