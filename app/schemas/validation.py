"""
Validation helpers shared by the writable note/section schemas.

Each check raises a PydanticCustomError of type "writable" whose message
comes from the schema's message table, so the API returns readable
messages such as "name can't be empty value" instead of pydantic's defaults.
Only the first failing rule of a field is reported.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic_core import PydanticCustomError


ERROR_TYPE = "writable"

BODY_ERROR_MESSAGE = "spec validation failed"


def _fail(messages: Mapping[str, str], key: str) -> PydanticCustomError:
    return PydanticCustomError(ERROR_TYPE, messages.get(key, f"validation for '{key}' failed"))


def check_name(
    value: Optional[str], messages: Mapping[str, str], max_len: int = 100
) -> Optional[str]:
    if not value:
        raise _fail(messages, "name.required")
    if not value.strip():
        raise _fail(messages, "name.notblank")
    if len(value) > max_len:
        raise _fail(messages, "name.max")
    return value


def check_text(
    value: Optional[str], messages: Mapping[str, str], field: str, max_len: int
) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise _fail(messages, f"{field}.max")
    return value


def check_labels(
    value: Optional[List[str]],
    messages: Mapping[str, str],
    max_count: int = 5,
    max_len: int = 20,
) -> Optional[List[str]]:
    if value is None:
        return value
    if len(value) > max_count:
        raise _fail(messages, "labels.max")
    if any(len(label) > max_len for label in value):
        raise _fail(messages, "labels.item.max")
    return value


def check_map(
    value: Optional[Dict[str, str]],
    messages: Mapping[str, str],
    field: str,
    max_count: int,
    max_key: int,
    max_value: int,
) -> Optional[Dict[str, str]]:
    if value is None:
        return value
    if len(value) > max_count:
        raise _fail(messages, f"{field}.max")
    for key, item in value.items():
        if len(key) > max_key or len(item) > max_value:
            raise _fail(messages, f"{field}.item.max")
    return value


def _error_key(error: Dict[str, Any]) -> str:
    # loc is ("body", "name") for request bodies, ("name",) for direct models
    loc: Sequence[Any] = [part for part in error.get("loc", ()) if part != "body"]
    field = str(loc[0]).lower() if loc else "body"
    if len(loc) > 1:
        return f"{field}.item.{error.get('type', 'invalid')}"
    return f"{field}.{error.get('type', 'invalid')}"


def translate_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Join validation errors into one message.

    Errors raised by the checks above keep their message. A malformed or
    missing body becomes "spec validation failed" and anything else (such
    as a wrong JSON type) becomes "validation for '<key>' failed".
    """
    msgs = []
    for error in errors:
        if error.get("type") == ERROR_TYPE:
            msgs.append(error.get("msg", ""))
        elif _is_body_error(error):
            msgs.append(BODY_ERROR_MESSAGE)
        else:
            msgs.append(f"validation for '{_error_key(error)}' failed")
    return ", ".join(dict.fromkeys(msgs))


def _is_body_error(error: Dict[str, Any]) -> bool:
    # The body itself is missing, not JSON or not an object
    loc = [part for part in error.get("loc", ()) if part != "body"]
    return error.get("type") == "json_invalid" or not loc
