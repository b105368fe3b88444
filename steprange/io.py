# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Line printing helpers for the command line tool.
The standard streams are looked up on each call, so that callers may redirect them.
'''

import sys
from typing import Any


def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stdout, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=sys.stderr, flush=flush)


def errSL(*items:Any, flush=False) -> None:
  "Write `items` to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=sys.stderr, flush=flush)
