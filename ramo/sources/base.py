import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ramo.core.errors import FieldFetchError


@dataclass
class FieldRecord:
    field_name: Optional[str]
    value: Optional[str]
    label: Optional[str] = None
    display_value: Optional[str] = None
    object_name: Optional[str] = None


class FieldSource(ABC):
    """Base class inherited by every place a JSON field can be read from."""

    def __init__(self, target: str) -> None:
        self.target = target

    @property
    @abstractmethod
    def name(self) -> str:
        """Friendly source name (e.g., File, HTTP)."""
        pass

    @classmethod
    @abstractmethod
    def detect(cls, target: str) -> bool:
        """Returns True if this source can read the given target."""
        pass

    @abstractmethod
    async def fetch(self, field_name: Optional[str]) -> FieldRecord:
        pass

    def extract_field(self, text: str, field_name: Optional[str]) -> FieldRecord:
        """
        Pulls one field out of a record document.

        Records look like {"apiName": ..., "fields": {"F": {"value": ...}}};
        flat documents with the field at the top level also work. With no
        field name the whole document is the payload.
        """
        if not field_name:
            return FieldRecord(field_name=None, value=text)

        try:
            record = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise FieldFetchError(f"Failed to load field '{field_name}': record is not JSON ({e})") from e

        if not isinstance(record, dict):
            raise FieldFetchError(f"Failed to load field '{field_name}': record is not an object")

        fields = record.get("fields")
        field_info: Dict[str, Any] = {}
        if isinstance(fields, dict) and isinstance(fields.get(field_name), dict):
            field_info = fields[field_name]

        value = field_info.get("value")
        if value is None:
            value = record.get(field_name)

        if value is not None and not isinstance(value, str):
            value = json.dumps(value, ensure_ascii=False)

        return FieldRecord(
            field_name=field_name,
            value=value,
            label=field_info.get("label"),
            display_value=field_info.get("displayValue"),
            object_name=record.get("apiName"),
        )
