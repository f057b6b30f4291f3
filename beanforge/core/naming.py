"""Naming strategies turning column names into accessor and JSON key names."""

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .descriptor import ScalarPropertyDescriptor

_WORD_SEPARATOR = re.compile(r"[_\s]+")


def to_camel_case(name: str) -> str:
    """Upper-case the first letter of every word and drop separators.

    Letters inside a word keep their case, so "userID" stays "UserID".

    Examples:
        >>> to_camel_case("created_at")
        'CreatedAt'
    """
    return "".join(word[:1].upper() + word[1:] for word in _WORD_SEPARATOR.split(name) if word)


def to_snake_case(name: str) -> str:
    """Lower-case a column name and join words with underscores.

    Examples:
        >>> to_snake_case("CreatedAt")
        'created_at'
    """
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name)
    return "_".join(word.lower() for word in _WORD_SEPARATOR.split(spaced) if word)


def lcfirst(value: str) -> str:
    return value[:1].lower() + value[1:]


class NamingStrategy(ABC):
    """Policy mapping a property descriptor to identifier names."""

    @abstractmethod
    def get_getter_name(self, descriptor: "ScalarPropertyDescriptor") -> str:
        raise NotImplementedError

    @abstractmethod
    def get_setter_name(self, descriptor: "ScalarPropertyDescriptor") -> str:
        raise NotImplementedError

    @abstractmethod
    def get_variable_name(self, descriptor: "ScalarPropertyDescriptor") -> str:
        """Name of the setter parameter and constructor argument, without any sigil."""
        raise NotImplementedError

    @abstractmethod
    def get_json_property(self, descriptor: "ScalarPropertyDescriptor") -> str:
        raise NotImplementedError


class DefaultNamingStrategy(NamingStrategy):
    """camelCase accessors: created_at -> getCreatedAt / setCreatedAt / createdAt."""

    def get_getter_name(self, descriptor):
        return "get" + to_camel_case(descriptor.column_name)

    def get_setter_name(self, descriptor):
        return "set" + to_camel_case(descriptor.column_name)

    def get_variable_name(self, descriptor):
        return lcfirst(to_camel_case(descriptor.column_name))

    def get_json_property(self, descriptor):
        return self.get_variable_name(descriptor)


class SnakeCaseNamingStrategy(NamingStrategy):
    """snake_case accessors: CreatedAt -> get_created_at / set_created_at / created_at."""

    def get_getter_name(self, descriptor):
        return "get_" + to_snake_case(descriptor.column_name)

    def get_setter_name(self, descriptor):
        return "set_" + to_snake_case(descriptor.column_name)

    def get_variable_name(self, descriptor):
        return to_snake_case(descriptor.column_name)

    def get_json_property(self, descriptor):
        return self.get_variable_name(descriptor)


NAMING_STRATEGIES: dict[str, type[NamingStrategy]] = {
    "camel": DefaultNamingStrategy,
    "snake": SnakeCaseNamingStrategy,
}


def get_naming_strategy(name: str) -> NamingStrategy:
    """Instantiate a registered naming strategy by name.

    Raises:
        ValueError: If no strategy is registered under that name
    """
    if name not in NAMING_STRATEGIES:
        raise ValueError(f"Unknown naming strategy: {name}. Use one of: {', '.join(NAMING_STRATEGIES)}")
    return NAMING_STRATEGIES[name]()
