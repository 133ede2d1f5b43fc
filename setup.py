#!/usr/bin/python
# -*- coding: utf-8 -*-
import os
import sys
import codecs

from setuptools import setup, find_packages

python_version = sys.version_info
if python_version < (3, 6):
    sys.exit("manifuncs require as a minimum Python 3.6, sorry")


# helper function to read the README file
def read(fname):
    return codecs.open(os.path.join(os.path.dirname(__file__), fname), 'r', 'utf8').read()


# Get the version without importing the package, as its dependencies are maybe not installed yet
def get_version():
    info = {}
    exec(read(os.path.join('manifuncs', 'info.py')), info)
    return info['VERSION']


setup(
    name="manifuncs",
    version=get_version(),
    packages=find_packages(exclude=['test', 'test.*']),
    description="Manifest and template functions: prefix and uniq for lists and strings",
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    license="MIT",
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Systems Administration',
    ],
    install_requires=[
        'jinja2',
        'termcolor',
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
