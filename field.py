from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol, TypeVar, Union, runtime_checkable

if TYPE_CHECKING:
    from rational import Rational

F = TypeVar("F", bound="Field")


@runtime_checkable
class Field(Protocol):
    """Operations a coefficient type must provide to be used in a Polynomial.

    Rational is the stock implementation; polynomial code only goes through
    this surface so another coefficient domain can be substituted.
    """

    @classmethod
    def zero(cls: type[F]) -> F: ...

    @classmethod
    def one(cls: type[F]) -> F: ...

    @classmethod
    def from_int(cls: type[F], value: int) -> F: ...

    def is_zero(self) -> bool: ...

    def __add__(self: F, other: F) -> F: ...

    def __sub__(self: F, other: F) -> F: ...

    def __mul__(self: F, other: Union[F, int]) -> F: ...

    def __truediv__(self: F, other: F) -> F: ...

    def __neg__(self: F) -> F: ...

    def __eq__(self, other: object) -> bool: ...

    def try_int(self) -> Optional[int]: ...

    def to_float(self) -> float: ...

    def to_rational(self) -> "Rational": ...
