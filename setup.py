# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='steprange',
  version='0.0.1',
  description='steprange provides lazy arithmetic sequences of numbers, described by start, step, and end values.',
  python_requires='>=3.10',

  packages=['steprange'],
  entry_points={'console_scripts': ['steprange=steprange.__main__:main']},
)
