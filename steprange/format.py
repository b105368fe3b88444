# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Number formatting.'

from typing import Iterable, overload

from .num import Num


@overload
def fmt_num(n:Num) -> str: ...
@overload
def fmt_num(n:None) -> None: ...

def fmt_num(n:Num|None) -> str|None:
  '''
  Remove trailing ".0" from floats that can be represented as integers.
  Other floats use the shortest repr that parses back to the same value.
  '''
  if n is None: return None
  if isinstance(n, float):
    try: i = int(n)
    except (OverflowError, ValueError): return str(n) # inf and nan.
    if i == n: return str(i)
  return str(n)


def fmt_nums(nums:Iterable[Num], sep:str=' ') -> str:
  return sep.join(fmt_num(n) for n in nums)
