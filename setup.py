#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2014-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst')) as readme_fh:
    README = readme_fh.read()


def parse_requirements(filename):
    """Pull in the install_requires values from the requirements file."""
    with open(os.path.join(here, filename)) as req_fh:
        return [line.strip() for line in req_fh
                if line.strip() and not line.startswith('#')]


setup(name='bsteer',
      version='1.0.0',
      description="Band steering decision engine for Wi-Fi client steering",
      long_description=README,
      classifiers=[
          "Development Status :: 4 - Beta",
          "Programming Language :: Python :: 3",
      ],
      keywords='wifi band steering btm 802.11v',
      author="Qualcomm Atheros, Inc.",
      url="https://www.qualcomm.com/",
      packages=find_packages(exclude=['tests', 'tests.*']),
      scripts=['scripts/%s' % f for f in os.listdir(os.path.join(here, 'scripts'))],
      include_package_data=True,
      zip_safe=True,
      python_requires='>=3.6',
      install_requires=parse_requirements('requirements.txt'),
      extras_require={
          'test': ['pytest', 'coverage', 'mock'],
          'dev': ['flake8'],
      },
      entry_points="""
      # -*- Entry points: -*-
      """,
      )
