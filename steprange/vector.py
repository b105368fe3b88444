# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, Protocol, runtime_checkable

from .num import is_num, Num


@runtime_checkable
class VectorLike(Protocol):
  '''
  A protocol for one-dimensional numeric collections.
  Ranges and matrices both provide this capability; plain lists and tuples are accepted wherever a VectorLike is.
  '''

  def size(self) -> list[int]: ...

  def to_array(self) -> list[Num]: ...

  def to_vector(self) -> list[Num]: ...

  def is_vector(self) -> bool: ...

  def is_scalar(self) -> bool: ...

  def to_scalar(self) -> Num|None: ...


def vector_items(obj:Any) -> list[Num]:
  '''
  Return a new list containing the elements of `obj`,
  which must be either a VectorLike or a list or tuple of numbers.
  '''
  if isinstance(obj, VectorLike):
    if not obj.is_vector(): raise TypeError(f'expected a one-dimensional collection; received: {obj!r}')
    return list(obj.to_vector())
  if isinstance(obj, (list, tuple)):
    for i, el in enumerate(obj):
      if not is_num(el): raise TypeError(f'vector element {i} must be a number; received: {el!r}')
    return list(obj)
  raise TypeError(f'expected a vector-like collection; received: {obj!r}')
