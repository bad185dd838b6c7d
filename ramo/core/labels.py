import re
from typing import Optional


def field_label(
    field_name: Optional[str],
    record_label: Optional[str] = None,
    display_value: Optional[str] = None,
) -> str:
    """Picks the friendliest name available for a field."""
    if record_label:
        return record_label
    if display_value:
        return display_value
    if field_name:
        return re.sub(r"__c$", "", field_name).replace("_", " ") or "JSON Field"
    return "JSON Field"
