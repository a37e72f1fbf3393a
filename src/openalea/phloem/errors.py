#  -*- coding: utf-8 -*-

"""
    openalea.phloem.errors
    ~~~~~~~~~~~~~~~~~~~~~~

    The module :mod:`openalea.phloem.errors` defines the exceptions raised by the package.

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""


class InvalidArgument(ValueError):
    """
    Raised when a carbon potential is negative, when a kinetic parameter is not strictly positive,
    or when a node role is neither a sink nor a source.
    """


class BadUnitError(ValueError):
    """Raised when a declared unit is not known by the pint unit registry."""


class BadDefaultError(ValueError):
    """Raised when a declared value lies outside its [min_value, max_value] interval."""
