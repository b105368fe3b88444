# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, Iterator

from .format import fmt_nums
from .num import Num
from .vector import vector_items


class Matrix:
  '''
  A minimal one-dimensional numeric matrix.
  The matrix always owns a private copy of its data; the constructor never aliases its argument.
  '''

  _data:list[Num]

  def __init__(self, data:Any=()) -> None:
    self._data = vector_items(data)

  def __len__(self) -> int: return len(self._data)

  def __iter__(self) -> Iterator[Num]: return iter(self._data)

  def __eq__(self, other:object) -> bool:
    return isinstance(other, Matrix) and self._data == other._data

  def __repr__(self) -> str: return f'{type(self).__name__}({self._data!r})'

  def __str__(self) -> str: return f'[{fmt_nums(self._data, sep=", ")}]'

  def size(self) -> list[int]: return [len(self._data)]

  def to_array(self) -> list[Num]: return list(self._data)

  to_vector = to_array

  def is_vector(self) -> bool: return True

  def is_scalar(self) -> bool: return len(self._data) == 1

  def to_scalar(self) -> Num|None:
    return self._data[0] if len(self._data) == 1 else None
