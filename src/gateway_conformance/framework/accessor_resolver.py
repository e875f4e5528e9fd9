"""Accessor name derivation and binding.

A parameter key such as ``apiKey``, ``api_key`` or ``API-Key`` maps to the
accessor pair ``get_api_key`` / ``set_api_key``. Gateways normally declare
their accessors through ``parameter_bindings()``; the derived names are the
fallback for targets that do not, and for requests.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, List, Optional, Tuple

# Word boundaries inside a separator-free chunk: "APIKey" -> API, Key;
# "apiKey2" -> api, Key2.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+")
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")


@dataclass(frozen=True)
class AccessorNames:
    """Getter and setter method names for one parameter key."""

    getter: str
    setter: str


@dataclass(frozen=True)
class ParameterBinding:
    """One entry of a declarative accessor table.

    Attributes:
        key: Parameter key as declared in the default parameters
        getter: Zero-argument callable returning the current value, or None
        setter: One-argument callable storing a value, or None
    """

    key: str
    getter: Optional[Callable[[], Any]]
    setter: Optional[Callable[[Any], Any]]

    @property
    def complete(self) -> bool:
        return self.getter is not None and self.setter is not None


@lru_cache(maxsize=None)
def split_words(key: str) -> Tuple[str, ...]:
    """Split a key in any identifier casing into lowercase words."""
    words: List[str] = []
    for chunk in _SEPARATOR_RE.split(key):
        words.extend(w.lower() for w in _WORD_RE.findall(chunk))
    if not words:
        raise ValueError(f"Parameter key has no identifier characters: {key!r}")
    return tuple(words)


def capitalized_form(key: str) -> str:
    """Return the capitalized-word form of a key (``api_key`` -> ``ApiKey``)."""
    return "".join(word.capitalize() for word in split_words(key))


@lru_cache(maxsize=None)
def accessor_names(key: str) -> AccessorNames:
    """Derive the getter/setter names for a parameter key."""
    suffix = "_".join(split_words(key))
    return AccessorNames(getter=f"get_{suffix}", setter=f"set_{suffix}")


def derived_names(key) -> Optional[AccessorNames]:
    """Like ``accessor_names`` but returns None for keys that name no accessor."""
    try:
        return accessor_names(key)
    except (TypeError, ValueError):
        return None


def callable_attr(target, name: str) -> Optional[Callable]:
    """Return ``target.name`` if it exists and is callable, else None."""
    attr = getattr(target, name, None)
    return attr if callable(attr) else None


class AccessorResolver:
    """Binds parameter keys to accessor callables on a gateway or request."""

    def declared_bindings(self, target) -> Optional[List[ParameterBinding]]:
        """Return the target's declared accessor table, or None if it has none."""
        declare = callable_attr(target, "parameter_bindings")
        if declare is None:
            return None
        return list(declare())

    def bind(self, target, key: str) -> ParameterBinding:
        """Bind ``key`` to the target's getter and setter.

        The declared table wins when the target provides one and lists the
        key. Otherwise the derived names are looked up. Missing accessors are
        returned as ``None`` entries so callers can report them.
        """
        table = self.declared_bindings(target)
        if table is not None:
            for binding in table:
                if binding.key == key:
                    return binding

        names = derived_names(key)
        if names is None:
            return ParameterBinding(key=key, getter=None, setter=None)
        return ParameterBinding(
            key=key,
            getter=callable_attr(target, names.getter),
            setter=callable_attr(target, names.setter),
        )

    def getter(self, target, key: str) -> Optional[Callable[[], Any]]:
        return self.bind(target, key).getter

    def setter(self, target, key: str) -> Optional[Callable[[Any], Any]]:
        return self.bind(target, key).setter
