#!/usr/bin/env python
# -*- coding: utf-8 -*-

# format setup arguments

from setuptools import setup, find_namespace_packages

short_descr = "Carbon flux kinetics and phloem rheology for pressure-flow models of plant carbon transport"
readme = open('README.md').read()

# find packages
pkgs = find_namespace_packages(where='src', include=['openalea.*'])

# find version number in src/openalea/phloem/version.py
_version = {}
with open("src/openalea/phloem/version.py") as fp:
    exec(fp.read(), _version)

version = _version['__version__']

setup_kwds = dict(
    name='openalea.phloem',
    version=version,
    description=short_descr,
    long_description=readme,
    long_description_content_type='text/markdown',
    url='https://github.com/openalea/phloem',
    license='cecill-c',
    zip_safe=False,

    packages=pkgs,
    package_dir={'': 'src'},

    install_requires=['numpy', 'pandas', 'pint'],
    extras_require={'test': ['pytest']},

    entry_points={},
    keywords='phloem, carbon, Munch, FSPM',
)


setup(**setup_kwds)
