"""
JSON:API helpers shared by the services
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from tfe_sdk.errors import ValidationError
from tfe_sdk.types import ListOptions, Permissions


def valid_string(value: Optional[str]) -> bool:
    return value is not None and value != ""


def require(value: Optional[str], field_name: str) -> str:
    """Return value, or raise ValidationError when it is missing or empty"""
    if not valid_string(value):
        raise ValidationError(field_name)
    return value


def escape(segment: str) -> str:
    """Percent-escape a single URL path segment"""
    return quote(segment, safe="")


def document(resource_type: str, attributes: Dict[str, Any]) -> dict:
    """Wrap attributes into a JSON:API request document"""
    return {"data": {"type": resource_type, "attributes": attributes}}


def set_if(attributes: Dict[str, Any], key: str, value: Any) -> None:
    """Set attribute only when value was supplied"""
    if value is not None:
        attributes[key] = value


def list_params(options: Optional[ListOptions]) -> Dict[str, int]:
    params = {}
    if options:
        if options.page_number is not None:
            params["page[number]"] = options.page_number
        if options.page_size is not None:
            params["page[size]"] = options.page_size
    return params


def decode_permissions(data: Optional[dict]) -> Permissions:
    return Permissions(actions={k: bool(v) for k, v in (data or {}).items()})


def relationship_id(resource: dict, name: str) -> Optional[str]:
    """Return the id of a to-one relationship, if present"""
    related = (resource.get("relationships") or {}).get(name) or {}
    data = related.get("data")
    if isinstance(data, dict):
        return data.get("id")
    return None
