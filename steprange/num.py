# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Numeric utilities.
'''

from math import isfinite, isnan
from typing import Any


Num = int|float


def is_num(val:Any) -> bool:
  'Return True if `val` is an int or float. Note that bool is excluded, even though it is a subclass of int.'
  return isinstance(val, (int, float)) and not isinstance(val, bool)


def is_finite_num(val:Any) -> bool:
  if not is_num(val): return False
  try: return isfinite(val)
  except OverflowError: return False # An int too large to convert to float.


def is_nan(val:Any) -> bool:
  return isinstance(val, float) and isnan(val)


def sign(n:Num) -> Num:
  '''
  Return 1 for positive numbers, -1 for negative numbers, and 0 for zero (including negative zero).
  NaN is returned unchanged, so that it never compares equal to another sign.
  '''
  if is_nan(n): return n
  if n > 0: return 1
  if n < 0: return -1
  return 0


def parse_num(text:str) -> Num|None:
  '''
  Convert `text` to an int if it is an integer literal, otherwise to a float.
  Surrounding whitespace is ignored, as are `_` digit separators.
  Return None if the text is not a number, or if the result is not finite as a float.
  '''
  try: i = int(text)
  except ValueError: pass
  else: return i if is_finite_num(i) else None
  try: f = float(text)
  except ValueError: return None
  return f if isfinite(f) else None
