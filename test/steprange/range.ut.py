# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from copy import copy
from math import floor

from steprange.exceptions import RangeUsageError
from steprange.matrix import Matrix
from steprange.range import parse_range, Range
from steprange.vector import VectorLike
from utest import utest, utest_exc, utest_repr, utest_seq, utest_seq_approx, utest_val


# Construction.

utest_repr('Range(0, 1, 0)', Range)
utest_repr('Range(2, 1, 5)', Range, 2, None, 5)
utest_repr('Range(1.5, -0.5, 0)', Range, 1.5, -0.5, 0)
utest_repr('Range(0, 1, 4)', Range, end=4)

utest_exc(TypeError("Range parameter `start` must be a number; received: '1'"), Range, '1')
utest_exc(TypeError("Range parameter `end` must be a number; received: '5'"), Range, 0, 1, '5')
utest_exc(TypeError('Range parameter `step` must be a number; received: True'), Range, 0, True, 5)
utest_exc(TypeError("Range parameter `start` must be a number; received: 'a'"), Range, 'a', 'b', 'c')
utest_exc(ValueError('Range parameter `end` must be finite as a float; received: inf'), Range, 0, 1, float('inf'))
utest_exc(ValueError('Range parameter `start` must be finite as a float; received: -inf'), Range, float('-inf'))
utest_exc(ValueError, Range, 0, 1, 10**400) # Too large to convert to float.
utest_exc(ValueError('Range step is too small to advance from start to end: 1e+16, 1, 1.0000000000000004e+16'),
  Range, 1e16, 1, 1e16 + 4)
utest_exc(ValueError, Range, 1e16, 1, 1e16) # Would never advance past the single value.
utest_exc(ValueError, Range, -1e16, -0.5, -1e16 - 8)

r = Range(2, 1, 5)
utest_exc(RangeUsageError, r.__init__, 0, 1, 3)
utest_exc(RangeUsageError, Range.__init__, object(), 0, 1, 3)
utest_val([2, 3, 4, 5], r.to_array(), 'range after rejected re-initialization')

utest_exc(AttributeError('Range attributes are readonly'), setattr, r, 'start', 0)
utest_exc(AttributeError('Range attributes are readonly'), delattr, r, 'end')


# Parsing.

utest(Range(2, 1, 5), Range.parse, '2:5')
utest(Range(0, 0.5, 2), Range.parse, '0:0.5:2')
utest(Range(-1.5, 1, 1000), Range.parse, ' -1.5 : 1e3 ')
utest(Range(2, 1, 5), parse_range, '2:5')
utest_seq([2, 3, 4, 5], parse_range('2:5').to_array)
utest_seq([2, 1, 0, -1, -2], parse_range('2:-1:-2').to_array)

utest(None, Range.parse, 'abc:5')
utest(None, Range.parse, '1:2:3:4')
utest(None, Range.parse, '5')
utest(None, Range.parse, '')
utest(None, Range.parse, '1::5')
utest(None, Range.parse, '0:nan')
utest(None, Range.parse, '0:inf')
utest(None, Range.parse, '0:' + '9' * 400)
utest(None, Range.parse, '-' + '9' * 400 + ':1:0')
utest(None, Range.parse, 42)
utest(None, Range.parse, None)


# Size.

utest([4], Range(2, 1, 5).size)
utest([5], Range(2, -1, -2).size)
utest([3], Range(0, 2, 5).size)
utest([5], Range(0, 0.25, 1).size)
utest([1], Range(3, 1, 3).size)
utest([1], Range(3, -2, 3).size)
utest([1], Range(3, 0, 3).size)
utest([1], Range().size)
utest([0], Range(0, 0, 5).size)
utest([0], Range(5, 1, 2).size)
utest([0], Range(2, -1, 5).size)
utest([0], Range(1e16, 1, 0).size) # Empty, so the small step is never applied.
utest(4, len, Range(2, 1, 5))

for start, step, end in [(0, 1, 10), (0, 3, 10), (-5, 2, 5), (1, 0.5, 3), (10, -3, 0), (0, -0.25, -1)]:
  r = Range(start, step, end)
  n = floor((end - start) / step) + 1
  utest_val([n], r.size(), f'size of {r!r}')
  utest_val(n, len(r.to_array()), f'traversal length of {r!r}')

# Size agrees with traversal when the difference overflows, and for large bounds.
for r in [Range(-1e308, 1e308, 1e308), Range(1e16, 2, 1e16 + 4), Range(10**17, 1, 10**17 + 4), Range(-10**308, 10**307, 10**308)]:
  utest_val(r.size(), [len(r.to_array())], f'size and traversal of {r!r}')
  utest_val(r.is_scalar(), r.to_scalar() is not None, f'scalar agreement of {r!r}')

utest([3], Range(-1e308, 1e308, 1e308).size)
utest_seq([-1e308, 0.0, 1e308], Range, -1e308, 1e308, 1e308)
utest_seq([1e16, 1e16 + 2, 1e16 + 4], Range, 1e16, 2, 1e16 + 4)
utest([21], Range(-10**308, 10**307, 10**308).size)


# NaN fields produce empty ranges, except for a NaN step with equal bounds.

nan = float('nan')
utest([0], Range(nan, 1, 5).size)
utest_seq([], Range, nan, 1, 5)
utest([0], Range(0, -1, nan).size)
utest_seq([], Range, 0, -1, nan)
utest([0], Range(0, nan, 5).size)
utest_seq([], Range, 0, nan, 5)
utest([1], Range(3, nan, 3).size)
utest_seq([3], Range, 3, nan, 3)
utest(False, Range(nan, 1, 5).is_scalar)
utest(None, Range(nan, 1, 5).to_scalar)
utest('nan:5', str, Range(nan, 1, 5))


# Traversal.

utest_seq([2, 3, 4, 5], Range, 2, 1, 5)
utest_seq([2, 1, 0, -1, -2], Range, 2, -1, -2)
utest_seq([0, 0.5, 1.0, 1.5, 2.0], Range, 0, 0.5, 2)
utest_seq([0, 2, 4], Range, 0, 2, 5)
utest_seq([3], Range, 3, 0, 3)
utest_seq([], Range, 0, 0, 5)
utest_seq([], Range, 5, 1, 2)
utest_seq([], Range, 2, -1, 5)
utest_seq_approx([0, 0.1, 0.2, 0.3, 0.4], Range, 0, 0.1, 0.45)

calls:list = []
r = Range(2, -1, 0)
r.for_each(lambda x, i, rr: calls.append((x, i, rr is r)))
utest_val([(2, 0, True), (1, 1, True), (0, 2, True)], calls, 'for_each callback arguments')

utest_seq([4, 6, 8], Range(2, 1, 4).map, lambda x, i, r: x * 2)
utest_seq([(0, 5), (1, 6)], Range(5, 1, 6).map, lambda x, i, r: (i, x))
utest_seq([], Range(5, 1, 4).map, lambda x, i, r: x)


# Conversions.

r = Range(1, 0.5, 3)
a = r.to_array()
utest_val([1, 1.5, 2.0, 2.5, 3.0], a, 'to_array')
utest_val(a, r.to_array(), 'repeated to_array')
utest_val(False, a is r.to_array(), 'to_array returns a new list')
utest_val(a, r.to_vector(), 'to_vector')
utest_val(a, r.value_of(), 'value_of')

c = r.clone()
utest_val(r, c, 'clone equality')
utest_val(False, c is r, 'clone identity')
utest_val(a, c.to_array(), 'clone values')
utest_val(r, copy(r), 'copy')

utest(Matrix([2, 3, 4]), Range(2, 1, 4).to_matrix)
m = r.to_matrix()
m.to_array().append(99)
utest_val(a, m.to_array(), 'matrix values')
utest(Matrix([]), Range(5, 1, 4).to_matrix)

utest(True, Range(2, 1, 5).is_vector)
utest(False, Range(2, 1, 5).is_scalar)
utest(True, Range(3, 1, 3).is_scalar)
utest(3, Range(3, 1, 3).to_scalar)
utest(True, Range(3, 0, 3).is_scalar)
utest(3, Range(3, 0, 3).to_scalar)
utest(None, Range(2, 1, 5).to_scalar)
utest(None, Range(5, 1, 2).to_scalar)
utest(True, isinstance, Range(), VectorLike)


# Text.

utest('2:5', str, Range(2, 1, 5))
utest('2:-1:-2', str, Range(2, -1, -2))
utest('0:0.2:10', str, Range(0, 0.2, 10))
utest('0:1', str, Range(0.0, 1.0, 1.0))
utest('0:0', str, Range())

for r in [Range(2, 1, 5), Range(2, -1, -2), Range(0, 0.25, 2), Range(-1.5, 0.5, 1), Range(0, 0.1, 0.45)]:
  utest_val(r.to_array(), Range.parse(str(r)).to_array(), f'text round trip of {r!r}')


# Value semantics.

utest_val(Range(2, 1, 5), Range(2.0, 1, 5.0), 'int and float fields compare equal')
utest_val(hash(Range(2, 1, 5)), hash(Range(2.0, 1, 5.0)), 'hash')
utest_val(False, Range(2, 1, 5) == Range(2, 1, 6), 'inequality')
utest_val(False, Range(2, 1, 5) == (2, 1, 5), 'inequality with tuple')
