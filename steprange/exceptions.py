# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes.
'''


class RangeUsageError(Exception):
  '''
  Raised when the Range initializer is invoked in a way that does not produce a new instance:
  either on an object that is not a Range, or on a Range that has already been initialized.
  '''
