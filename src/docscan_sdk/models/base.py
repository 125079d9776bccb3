"""
Building blocks for decoded Doc Scan resources

Every resource is a dataclass whose field names match the wire keys, with
an explicit ``from_dict`` constructor. Polymorphic resources are grouped in
a VariantFamily: an explicit table from discriminator tag to model, with
UnknownResource as the fallback for tags the SDK does not know yet.
"""

import logging
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional, Type, Union

from ..exceptions import DecodeError

logger = logging.getLogger(__name__)


def _encode(value: Any) -> Any:
    if isinstance(value, (ResourceModel, UnknownResource)):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


class ResourceModel:
    """Base for decoded API resources (subclasses are dataclasses)."""

    @classmethod
    def from_dict(cls, data: Any) -> 'ResourceModel':
        """Build the resource from its decoded JSON object. Subclasses must override this."""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """Render the resource in its wire shape."""
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} is not a dataclass")
        return {f.name: _encode(getattr(self, f.name)) for f in fields(self)}


@dataclass
class UnknownResource:
    """
    Fallback variant for discriminator tags without a registered model.

    Attributes:
        tag: Raw discriminator value (None when the object carried none)
        raw: Raw object fields, unmodified
    """
    tag: Optional[Any]
    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.raw)


Decodable = Union[Type[ResourceModel], 'VariantFamily']


class VariantFamily:
    """
    Explicit dispatch table from discriminator tag to resource model.

    New tags can be added at runtime with ``register``; decoding an object
    whose tag is not registered yields UnknownResource instead of failing.
    """

    def __init__(self, name: str, variants: Dict[str, Type[ResourceModel]], discriminator: str = 'type'):
        self.name = name
        self.discriminator = discriminator
        self._variants = dict(variants)

    def register(self, tag: str, model: Type[ResourceModel]) -> None:
        if not tag:
            raise ValueError("Variant tag cannot be empty")
        self._variants[tag] = model

    @property
    def tags(self) -> List[str]:
        return list(self._variants)

    def from_dict(self, data: Any) -> Union[ResourceModel, UnknownResource]:
        data = expect_object(data, self.name)
        tag = data.get(self.discriminator)
        model = self._variants.get(tag) if isinstance(tag, str) else None
        if model is None:
            logger.debug(f"Unknown {self.name} variant {tag!r}, keeping raw fields")
            return UnknownResource(tag=tag, raw=dict(data))
        return model.from_dict(data)

    def __repr__(self) -> str:
        return f"VariantFamily({self.name!r}, discriminator={self.discriminator!r}, tags={self.tags!r})"


def expect_object(data: Any, resource: str) -> Dict[str, Any]:
    """Ensure a decoded JSON value is an object."""
    if not isinstance(data, dict):
        raise DecodeError.wrong_type(resource, None, 'an object', data)
    return data


def required(data: Dict[str, Any], key: str, resource: str) -> Any:
    """Return a required field, raising DecodeError when absent or null."""
    value = data.get(key)
    if value is None:
        raise DecodeError.missing_field(resource, key)
    return value


def nested(data: Dict[str, Any], key: str, model: Decodable) -> Any:
    """Decode an optional nested object."""
    value = data.get(key)
    if value is None:
        return None
    return model.from_dict(value)


def nested_list(data: Dict[str, Any], key: str, model: Decodable, resource: str) -> List[Any]:
    """Decode an optional list of nested objects (absent means empty)."""
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise DecodeError.wrong_type(resource, key, 'a list', values)
    return [model.from_dict(value) for value in values]


def value_list(data: Dict[str, Any], key: str, resource: str) -> List[Any]:
    """Return an optional list of plain values (absent means empty)."""
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise DecodeError.wrong_type(resource, key, 'a list', values)
    return list(values)


def value_map(data: Dict[str, Any], key: str, resource: str) -> Dict[str, Any]:
    """Return an optional object of plain values (absent means empty)."""
    values = data.get(key)
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise DecodeError.wrong_type(resource, key, 'an object', values)
    return dict(values)
