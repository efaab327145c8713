#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

PATHSTORE_PATH = HERE / "pathstore"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(PATHSTORE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='pathstore',
      version=VERSION,
      description='Path addressed JSON document store mirrored to a persistent slot',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(exclude=['*.tests', '*.tests.*']),
      package_data={'pathstore': ['patch_format.schema.json']},
      install_requires=[
          'colorama',
          'jupyter_core',
          'pygments',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'pathstore = pathstore.storeapp:main',
          ],
      },
    )
