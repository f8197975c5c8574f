"""
Типы результатов: поиск (Found / NotFound) и валидация (Validated / Invalid)
"""
from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar, Union

T = TypeVar("T")

FieldErrors = Dict[str, List[Dict[str, str]]]


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T

    ok = True


@dataclass(frozen=True)
class NotFound:
    message: str

    ok = False


@dataclass(frozen=True)
class Validated(Generic[T]):
    value: T

    ok = True


@dataclass(frozen=True)
class Invalid:
    errors: FieldErrors = field(default_factory=dict)

    ok = False

    @property
    def fields(self) -> List[str]:
        return sorted(self.errors)


LookupResult = Union[Found[T], NotFound]
ValidationResult = Union[Validated[T], Invalid]
