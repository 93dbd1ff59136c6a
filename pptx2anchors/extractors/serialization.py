"""
JSON conversion for the presentation model.

Model dataclasses become JSON objects tagged with their class name under
``"_type"``. Everything JSON cannot express natively is restored from the
dataclass field annotations on the way back:

    datetime          <-> ISO-8601 string
    Tuple[X, ...]     <-> list
    Mapping[int, str] <-> object with string keys (``slide_mapping``)
"""

import dataclasses
import functools
import types
import typing
from collections.abc import Mapping
from datetime import datetime

TYPE_FIELD = "_type"

_NONE_TYPE = type(None)


@functools.lru_cache(maxsize=None)
def _model_types() -> dict[str, type]:
    from pptx2anchors.extractors import data_types

    return {
        name: obj
        for name, obj in vars(data_types).items()
        if isinstance(obj, type) and dataclasses.is_dataclass(obj)
    }


def _to_jsonable(value: typing.Any) -> typing.Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        encoded = {TYPE_FIELD: type(value).__name__}
        for model_field in dataclasses.fields(value):
            encoded[model_field.name] = _to_jsonable(getattr(value, model_field.name))
        return encoded
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [_to_jsonable(item) for item in value]
    return value


def serialize_extraction(value: typing.Any) -> dict:
    """Convert a model object into a JSON-ready dict."""
    encoded = _to_jsonable(value)
    if not isinstance(encoded, dict):
        return {"value": encoded}
    return encoded


def _strip_optional(hint: typing.Any) -> typing.Any:
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(hint) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return members[0]
    return hint


def _from_jsonable(value: typing.Any, hint: typing.Any) -> typing.Any:
    if value is None:
        return None
    hint = _strip_optional(hint)

    if isinstance(value, dict) and TYPE_FIELD in value:
        return _build_model(value)

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin in (tuple, list) and isinstance(value, list):
        item_hint = args[0] if args else typing.Any
        items = [_from_jsonable(item, item_hint) for item in value]
        return tuple(items) if origin is tuple else items

    if origin in (dict, Mapping) and isinstance(value, dict):
        key_hint, item_hint = args if len(args) == 2 else (typing.Any, typing.Any)
        return {
            (int(key) if key_hint is int else key): _from_jsonable(item, item_hint)
            for key, item in value.items()
        }

    if hint is datetime and isinstance(value, str):
        return datetime.fromisoformat(value)

    if isinstance(value, dict) and hint in _model_types().values():
        return _build_model(value, hint)

    return value


def _build_model(data: dict, model: typing.Optional[type] = None) -> typing.Any:
    model = _model_types().get(data.get(TYPE_FIELD), model)
    if model is None:
        return data

    hints = typing.get_type_hints(model)
    kwargs = {
        model_field.name: _from_jsonable(data[model_field.name], hints[model_field.name])
        for model_field in dataclasses.fields(model)
        if model_field.name in data
    }
    return model(**kwargs)


def deserialize_extraction(data: dict) -> typing.Any:
    """
    Rebuild a model object from the output of ``serialize_extraction``.

    Args:
        data: A dict produced by ``serialize_extraction()`` or
            ``PptDocument.to_json()``, possibly after a JSON round trip.

    Returns:
        The model instance named by the ``"_type"`` tag.

    Raises:
        ValueError: ``data`` is not a dict or carries no ``"_type"`` tag.

    Example:
        >>> document = parse_pptx(buffer)
        >>> assert deserialize_extraction(document.to_json()) == document
    """
    if not isinstance(data, dict):
        raise ValueError("Expected a dict produced by serialize_extraction()")
    if TYPE_FIELD not in data:
        raise ValueError(f"Missing '{TYPE_FIELD}' tag, cannot tell which model to build")
    return _build_model(data)
