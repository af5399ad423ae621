"""
Quantity domain for Vector / Matrix.

Pure metadata design:
  - A quantity is an int or a float (bool, complex and None are rejected)
  - QuantityType describes what a vector holds (int or float)
  - Promotion is functional (immutable QuantityType instances)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Type, Union

from .errors import QuantityTypeError


Quantity = Union[int, float]


@dataclass(frozen=True)
class QuantityType:
    """
    Describes the numeric kind of a vector's contents.

    Attributes
    ----------
    kind : Type
        ``int`` or ``float``

    Notes
    -----
    - Promotion never mutates, always returns a new QuantityType
    - The ladder is int -> float; nothing climbs past float

    Examples
    --------
    >>> QuantityType(int)
    <int>
    >>> QuantityType(int).promote_with(2.5)
    <float>
    """

    kind: Type[Any]

    def __post_init__(self):
        if self.kind not in (int, float):
            raise QuantityTypeError(
                f"QuantityType kind must be int or float, not {getattr(self.kind, '__name__', self.kind)!s}"
            )

    def __repr__(self):
        return f"<{self.kind.__name__}>"

    def promote_with(self, value: Any) -> "QuantityType":
        """
        Promote this QuantityType to accommodate a new value.

        Parameters
        ----------
        value : Any
            Quantity to accommodate

        Returns
        -------
        QuantityType
            New (possibly promoted) QuantityType

        Raises
        ------
        QuantityTypeError
            If value is not a quantity
        """
        validate_quantity(value)
        if self.kind is int and isinstance(value, float):
            return QuantityType(float)
        return self


def is_quantity(value: Any) -> bool:
    """True for int and float instances, False for bool and everything else."""
    # Check bool BEFORE int (bool is subclass of int)
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def validate_quantity(value: Any) -> Quantity:
    """
    Validate a scalar before storing it in a vector.

    Returns
    -------
    Quantity
        The value, unchanged

    Raises
    ------
    QuantityTypeError
        If value is not an int or float
    """
    if not is_quantity(value):
        raise QuantityTypeError(
            f"Vector elements must be int or float, not {type(value).__name__} ({value!r})"
        )
    return value


def infer_quantity_type(values: Iterable[Any]) -> Optional[QuantityType]:
    """
    Infer a QuantityType from an iterable of quantities.

    Examples
    --------
    >>> infer_quantity_type([1, 2, 3])
    <int>
    >>> infer_quantity_type([1, 2.5, 3])
    <float>
    >>> infer_quantity_type([]) is None
    True
    """
    qtype: Optional[QuantityType] = None

    for v in values:
        if qtype is None:
            qtype = QuantityType(float if isinstance(validate_quantity(v), float) else int)
        else:
            qtype = qtype.promote_with(v)

    return qtype
