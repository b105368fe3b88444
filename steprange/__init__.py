# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
steprange provides `Range`, a lazy arithmetic sequence of numbers defined by start, step, and end values.
'''

from .exceptions import RangeUsageError
from .format import fmt_num
from .matrix import Matrix
from .num import Num, sign
from .range import parse_range, Range
from .vector import VectorLike


__all__ = [
  'fmt_num',
  'Matrix',
  'Num',
  'parse_range',
  'Range',
  'RangeUsageError',
  'sign',
  'VectorLike',
]
