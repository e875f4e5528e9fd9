"""Parameter descriptors derived from a gateway's default parameters."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from .accessor_resolver import AccessorResolver, derived_names


@dataclass(frozen=True)
class ParameterDescriptor:
    """One declared configuration key and its accessors on the gateway.

    Attributes:
        key: Key as it appears in ``get_default_parameters()``
        default_value: Declared default
        getter_name: Derived getter name, None when the key names no accessor
        setter_name: Derived setter name, None when the key names no accessor
        getter: Bound getter on the gateway, None when missing
        setter: Bound setter on the gateway, None when missing
    """

    key: str
    default_value: Any
    getter_name: Optional[str]
    setter_name: Optional[str]
    getter: Optional[Callable[[], Any]] = None
    setter: Optional[Callable[[Any], Any]] = None

    @property
    def has_accessor_names(self) -> bool:
        return self.getter_name is not None


class ParameterDescriptorSet:
    """Ordered, recomputed-per-gateway set of parameter descriptors."""

    def __init__(self, descriptors: List[ParameterDescriptor]):
        self._descriptors = list(descriptors)

    @classmethod
    def from_defaults(
        cls,
        defaults: Mapping,
        target=None,
        resolver: Optional[AccessorResolver] = None,
    ) -> "ParameterDescriptorSet":
        """Build descriptors for every key in ``defaults``, in order.

        When ``target`` is given its accessors are bound through the resolver.
        A key that yields no accessor names still gets a descriptor, with
        every name and accessor set to None.
        """
        resolver = resolver or AccessorResolver()
        descriptors = []
        for key, default in defaults.items():
            names = derived_names(key)
            getter = setter = None
            if target is not None and names is not None:
                binding = resolver.bind(target, key)
                getter, setter = binding.getter, binding.setter
            descriptors.append(
                ParameterDescriptor(
                    key=key,
                    default_value=default,
                    getter_name=names.getter if names else None,
                    setter_name=names.setter if names else None,
                    getter=getter,
                    setter=setter,
                )
            )
        return cls(descriptors)

    @classmethod
    def from_gateway(
        cls, gateway, resolver: Optional[AccessorResolver] = None
    ) -> "ParameterDescriptorSet":
        """Read ``gateway.get_default_parameters()`` and bind its accessors.

        Raises:
            TypeError: If the defaults are not a mapping
        """
        defaults = gateway.get_default_parameters()
        if not isinstance(defaults, Mapping):
            raise TypeError(
                f"get_default_parameters() must return a mapping, got {type(defaults).__name__}"
            )
        return cls.from_defaults(defaults, target=gateway, resolver=resolver)

    @property
    def keys(self) -> List[str]:
        return [d.key for d in self._descriptors]

    def defaults(self) -> Dict[str, Any]:
        return {d.key: d.default_value for d in self._descriptors}

    def get(self, key: str) -> ParameterDescriptor:
        for descriptor in self._descriptors:
            if descriptor.key == key:
                return descriptor
        raise KeyError(key)

    def __iter__(self) -> Iterator[ParameterDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, key) -> bool:
        return any(d.key == key for d in self._descriptors)
