from string import Template
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .exceptions import TemplateError, ValidationError

def validate_string(value: Optional[str]) -> str:
    """Validate and clean a string value."""
    if not value or not isinstance(value, str) or not value.strip():
        raise ValidationError("String value is required")
    return value.strip()

def normalize_code(value: Optional[str]) -> Optional[str]:
    """Trim and upper-case an identifier such as a currency code or PAN."""
    if value is None:
        return None
    return str(value).strip().upper()

def join_codes(values: Optional[Union[str, Iterable[str]]]) -> Optional[str]:
    """Upper-case and comma-join a list of codes, None when nothing is left.

    A plain string is one code or an already comma separated list.
    """
    if not values:
        return None
    if isinstance(values, str):
        values = values.split(",")
    codes = [normalize_code(v) for v in values]
    codes = [c for c in codes if c]
    return ",".join(codes) if codes else None

def compact_query(params: Mapping[str, Any]) -> Dict[str, str]:
    """Drop None/empty values and stringify the rest."""
    query: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        value = str(value).strip()
        if value:
            query[key] = value
    return query

def render_template(template: str, values: Mapping[str, Any]) -> str:
    """Substitute ${name} placeholders, failing on any missing name."""
    try:
        return Template(template).substitute(values)
    except KeyError as e:
        raise TemplateError(
            f"Missing template variable {e.args[0]!r}",
            details={"template": template}
        )
    except ValueError as e:
        raise TemplateError(f"Invalid template: {str(e)}", details={"template": template})

def merge_dicts(dict1: Dict[str, Any], dict2: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries."""
    result = dict1.copy()

    for key, value in dict2.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
