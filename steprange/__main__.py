#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from sys import exit

from .format import fmt_num
from .io import errL, errSL, outL
from .range import Range


def main(args:list[str]|None=None) -> None:
  arg_parser = ArgumentParser(prog='steprange', description='Print the values of a range, e.g. "2:5" or "0:0.25:1".')
  arg_parser.add_argument('range', help='range of the form "start:end" or "start:step:end"; precede a negative start with "--".')
  arg_parser.add_argument('-sep', default='\n', help='separator between values (defaults to newline).')
  arg_parser.add_argument('-count', action='store_true', help='print only the number of values.')
  arg_parser.add_argument('-sum', action='store_true', help='print only the sum of the values.')
  arg_parser.add_argument('-verbose', action='store_true', help='print the parsed range to stderr.')
  parsed = arg_parser.parse_args(args)

  if parsed.count and parsed.sum: exit('steprange error: -count and -sum are mutually exclusive.')

  r = Range.parse(parsed.range)
  if r is None:
    errL(f'steprange error: invalid range: {parsed.range!r}')
    exit(1)

  if parsed.verbose: errSL('range:', repr(r), 'size:', len(r))

  if parsed.count:
    outL(len(r))
  elif parsed.sum:
    total = 0
    for x in r: total += x
    outL(fmt_num(total))
  else:
    outL(parsed.sep.join(r.map(lambda x, i, _: fmt_num(x))))


if __name__ == '__main__': main()
