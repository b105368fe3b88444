# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A lazy arithmetic sequence described by start, step, and end values.
'''

from math import floor, inf, isfinite, isinf, ulp
from typing import Any, Callable, Iterator, TypeVar

from .exceptions import RangeUsageError
from .format import fmt_num
from .matrix import Matrix
from .num import is_finite_num, is_nan, is_num, Num, parse_num, sign


_R = TypeVar('_R')

_setattr = object.__setattr__


def _stalls(start:Num, step:Num, end:Num) -> bool:
  '''
  Return True if traversal would reach a value that adding `step` no longer changes.
  Only float arithmetic can stall. The ulp is largest at the bound of greatest magnitude, so it suffices to check there.
  '''
  if isinstance(start, int) and isinstance(step, int): return False
  if step == 0 or not sign(end - start) * sign(step) >= 0: return False # Zero steps, empty ranges and NaN never advance.
  return abs(step) <= ulp(max(abs(start), abs(end))) / 2


class Range:
  '''
  A range works similarly to a list, with methods like `for_each` and `map`.
  However it is very cheap to create compared to a large list,
  because it stores only the start, step and end values.
  The end value is inclusive.

  Example usage:
    Range(2, 1, 5).to_array()   # [2, 3, 4, 5]
    Range(2, -1, -2).to_array() # [2, 1, 0, -1, -2]
    str(Range(0, 0.5, 2))       # '0:0.5:2'

  Omitted values default to start=0, step=1, end=0.
  The realized values are recomputed on every call; nothing is cached.
  '''

  start:Num
  step:Num
  end:Num

  def __init__(self, start:Num|None=None, step:Num|None=None, end:Num|None=None) -> None:
    if not isinstance(self, Range):
      raise RangeUsageError(f'Range initializer must be invoked on a new Range instance; received: {self!r}')
    if 'end' in vars(self):
      raise RangeUsageError(f'Range is already initialized: {self!r}')

    for name, val in (('start', start), ('end', end), ('step', step)):
      if val is None: continue
      if not is_num(val): raise TypeError(f'Range parameter `{name}` must be a number; received: {val!r}')
      if not (is_finite_num(val) or is_nan(val)):
        raise ValueError(f'Range parameter `{name}` must be finite as a float; received: {val!r}')

    start = 0 if start is None else start
    step = 1 if step is None else step
    end = 0 if end is None else end
    if _stalls(start, step, end):
      raise ValueError(f'Range step is too small to advance from start to end: {start!r}, {step!r}, {end!r}')

    _setattr(self, 'start', start)
    _setattr(self, 'step', step)
    _setattr(self, 'end', end)


  @classmethod
  def parse(cls, text:Any) -> 'Range|None':
    '''
    Parse a string of the form 'start:end' or 'start:step:end' into a Range, for example '0:2:10'.
    Return None if `text` is not a string or does not describe a valid range.
    '''
    if not isinstance(text, str): return None
    nums = [parse_num(t) for t in text.split(':')]
    if any(n is None for n in nums): return None
    match nums:
      case [start, end]: return cls(start, 1, end)
      case [start, step, end]: return cls(start, step, end)
      case _: return None


  def __setattr__(self, name:str, val:Any) -> None:
    raise AttributeError('Range attributes are readonly')

  def __delattr__(self, name:str) -> None:
    raise AttributeError('Range attributes are readonly')

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self.start!r}, {self.step!r}, {self.end!r})'

  def __str__(self) -> str:
    '''
    The canonical text form, for example '2:5' or '0:0.2:10'.
    The step is omitted when it is 1.
    '''
    s = fmt_num(self.start)
    if self.step != 1:
      s += ':' + fmt_num(self.step)
    return s + ':' + fmt_num(self.end)

  def __eq__(self, other:object) -> bool:
    return type(self) == type(other) and vars(self) == vars(other)

  def __hash__(self) -> int:
    return hash((self.start, self.step, self.end))

  def __copy__(self) -> 'Range': return self.clone()

  def __len__(self) -> int: return self.size()[0]


  def __iter__(self) -> Iterator[Num]:
    '''
    Generate the values of the range.
    This is the single traversal primitive; every other method that produces values is built on it.
    A zero step produces a single value when start equals end, and nothing otherwise.
    '''
    x = self.start
    step = self.step
    end = self.end
    if step > 0:
      while x <= end:
        yield x
        x += step
    elif step < 0:
      while x >= end:
        yield x
        x += step
    elif x == end:
      yield x


  def clone(self) -> 'Range':
    return type(self)(self.start, self.step, self.end)


  def size(self) -> list[int]:
    '''
    Return the number of values in the range as a one-element list,
    matching the shape convention of other vector-like collections.
    '''
    start = self.start
    step = self.step
    end = self.end
    diff = end - start
    length = 0
    if step != 0 and sign(step) == sign(diff):
      if isinstance(start, int) and isinstance(step, int) and isinstance(end, int):
        length = diff // step + 1
      else:
        try: q = diff / step
        except OverflowError: q = inf # An int difference too large to convert to float.
        if isinf(q): q = end / step - start / step # The difference overflowed.
        if isfinite(q): length = floor(q) + 1
    elif diff == 0:
      length = 1
    return [length]


  def for_each(self, callback:Callable[[Num,int,'Range'],Any]) -> None:
    '''
    Invoke `callback` for each value in the range.
    The callback receives the value, its index, and the range being traversed.
    '''
    for i, x in enumerate(self):
      callback(x, i, self)


  def map(self, callback:Callable[[Num,int,'Range'],_R]) -> list[_R]:
    'Invoke `callback` for each value in the range, and return the results as a list.'
    results:list[_R] = []
    self.for_each(lambda x, i, r: results.append(callback(x, i, r)))
    return results


  def to_array(self) -> list[Num]:
    'Return a new list of the values in the range.'
    array:list[Num] = []
    self.for_each(lambda x, i, r: array.append(x))
    return array

  # Equal to `to_array`; provided for compatibility with Matrix.
  to_vector = to_array


  def to_matrix(self) -> Matrix:
    return Matrix(self.to_array())

  def is_vector(self) -> bool:
    'A range is always one-dimensional.'
    return True

  def is_scalar(self) -> bool:
    return self.size()[0] == 1

  def to_scalar(self) -> Num|None:
    'Return the sole value of the range, or None if the range does not consist of exactly one value.'
    array = self.to_array()
    return array[0] if len(array) == 1 else None

  def value_of(self) -> list[Num]:
    'The primitive value of the range: a one-dimensional list of its values.'
    return self.to_array()


parse_range = Range.parse
