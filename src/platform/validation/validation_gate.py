"""
Validation Gate

FastAPI parses and validates request bodies and query strings against the pydantic
schemas declared on each route. This module turns the resulting error list into the
public violation format ``{field, message, value}``, reporting every violated rule at
once and using the wording of the message catalog below.
"""

from typing import Any, Iterable, Mapping

from fastapi.encoders import jsonable_encoder


REQUEST_SOURCES = frozenset({'body', 'query', 'path', 'header', 'cookie'})

# field -> pydantic error type -> message
MESSAGE_CATALOG: dict[str, dict[str, str]] = {
    'name': {
        'missing': 'Product name is required',
        'not_null': 'Product name cannot be empty',
        'string_type': 'Product name must be a string',
        'string_too_short': 'Product name cannot be empty',
        'string_too_long': 'Product name cannot exceed 100 characters',
    },
    'description': {
        'string_type': 'Description must be a string',
        'not_null': 'Description must be a string',
        'string_too_long': 'Description cannot exceed 500 characters',
    },
    'price': {
        'missing': 'Product price is required',
        'not_null': 'Product price is required',
        'float_type': 'Price must be a number',
        'float_parsing': 'Price must be a number',
        'finite_number': 'Price must be a number',
        'greater_than': 'Price must be a positive number',
        'number_precision': 'Price cannot have more than 2 decimal places',
    },
    'category': {
        'missing': 'Product category is required',
        'not_null': 'Product category cannot be empty',
        'string_type': 'Product category must be a string',
        'string_too_short': 'Product category is required',
        'string_empty': 'category cannot be empty',
    },
    'stock': {
        'missing': 'Stock quantity is required',
        'not_null': 'Stock quantity is required',
        'int_type': 'Stock must be an integer',
        'int_parsing': 'Stock must be an integer',
        'int_from_float': 'Stock must be an integer',
        'greater_than_equal': 'Stock cannot be negative',
    },
    'email': {
        'missing': 'Email is required',
        'string_type': 'Please provide a valid email address',
        'value_error': 'Please provide a valid email address',
    },
    'password': {
        'missing': 'Password is required',
        'string_type': 'Password must be a string',
        'string_too_short': 'Password must be at least 6 characters',
        'password_too_long': 'Password cannot exceed 72 bytes',
    },
    'page': {
        'int_parsing': 'page must be an integer',
        'int_from_float': 'page must be an integer',
        'greater_than_equal': 'page must be greater than or equal to 1',
        'less_than_equal': 'page must be less than or equal to 9007199254740991',
    },
    'limit': {
        'int_parsing': 'limit must be an integer',
        'int_from_float': 'limit must be an integer',
        'greater_than_equal': 'limit must be greater than or equal to 1',
        'less_than_equal': 'limit must be less than or equal to 100',
    },
    'sort': {
        'enum': 'sort must be one of the allowed fields, optionally prefixed with "-"',
    },
    'minPrice': {
        'float_parsing': 'minPrice must be a number',
        'finite_number': 'minPrice must be a number',
        'greater_than_equal': 'minPrice must be greater than or equal to 0',
    },
    'maxPrice': {
        'float_parsing': 'maxPrice must be a number',
        'finite_number': 'maxPrice must be a number',
        'greater_than_equal': 'maxPrice must be greater than or equal to 0',
        'price_range': 'maxPrice must be greater than or equal to minPrice',
    },
    'search': {
        'string_empty': 'search cannot be empty',
        'string_too_long': 'search cannot exceed 100 characters',
    },
}

GENERIC_MESSAGES: dict[str, str] = {
    'json_invalid': 'Request body must be valid JSON',
    'model_attributes_type': 'Request body must be a JSON object',
    'dict_type': 'Request body must be a JSON object',
    'object_min': 'At least one field must be provided for update',
}


def _field_path(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in REQUEST_SOURCES:
        parts = parts[1:]
    return '.'.join(parts)


def _message_for(field: str, error: Mapping[str, Any]) -> str:
    error_type = error.get('type', '')
    leaf = field.rsplit('.', 1)[-1]
    if message := MESSAGE_CATALOG.get(leaf, {}).get(error_type):
        return message
    if message := GENERIC_MESSAGES.get(error_type):
        return message
    return str(error.get('msg', 'Invalid value'))


def _offending_value(error: Mapping[str, Any]) -> Any:
    if error.get('type') == 'missing':
        return None
    try:
        return jsonable_encoder(error.get('input'))
    except (TypeError, ValueError):
        return str(error.get('input'))


def to_violations(errors: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Convert pydantic/FastAPI error dicts to ``{field, message, value}`` entries."""
    violations = []
    for error in errors:
        field = _field_path(error.get('loc', ()))
        violations.append(
            {
                'field': field,
                'message': _message_for(field, error),
                'value': _offending_value(error),
            }
        )
    return violations
