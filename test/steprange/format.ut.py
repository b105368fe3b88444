# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from steprange.format import fmt_num, fmt_nums
from utest import utest


utest('2', fmt_num, 2)
utest('2', fmt_num, 2.0)
utest('0', fmt_num, -0.0)
utest('0.2', fmt_num, 0.2)
utest('-1.5', fmt_num, -1.5)
utest('0.30000000000000004', fmt_num, 0.1 + 0.2)
utest('inf', fmt_num, float('inf'))
utest(None, fmt_num, None)

utest('1 1.5 2', fmt_nums, [1, 1.5, 2.0])
utest('1,2', fmt_nums, [1, 2], sep=',')
utest('', fmt_nums, [])
