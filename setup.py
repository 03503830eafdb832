#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

# Use 'pip install -e .[test]' to install the prerequisites for running the
# test suite.

setup(name="groupwork",
      version="2024.1",
      description="Group submissions and task status tracking for unit tasks",
      long_description=open("README.rst", "rt").read(),

      license="MIT",
      packages=find_packages(exclude=["tests", "tests.*"]),
      python_requires=">=3.10",
      install_requires=[
          "django>=4.2",
          ],
      extras_require={
          "test": [
              "pytest",
              "pytest-django",
              "factory_boy>=3.3",
              ],
          },
      )
