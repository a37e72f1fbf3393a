#  -*- coding: utf-8 -*-

"""
    openalea.phloem.rheology
    ~~~~~~~~~~~~~~~~~~~~~~~~

    The module :mod:`openalea.phloem.rheology` defines the empirical functions describing how the resistance of the
    phloem sap and its osmotic pressure change with sugar concentration.

    Both functions are polynomial fits that are evaluated without any restriction on the concentration; values outside
    the fitted range are extrapolated. Non-finite results (inf, nan) are returned as such to the caller.

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""

import numpy as np

from .kinetics import as_output

# Coefficients of the phloem resistance ratio R/R0:
K1 = 0.19961
K2 = 1.00954
K3 = -2.2249
K4 = 1.2776

# Coefficients of the osmotic pressure ratio P/RT:
PRESSURE_A = 1.03913
PRESSURE_B = 0.86536
PRESSURE_C = 5.2465


def _warn_if_not_finite(name, cab, value):
    if not np.all(np.isfinite(value)):
        print("WARNING: the %s is not finite for a concentration ratio of" % name, cab, "!")


def phloem_resistance_ratio(cab, printing_warnings=False):
    """
    This function computes the phloem resistance ratio R/R0 as a function of the concentration ratio cab:
        R/R0 = (1 + k1 cab + k2 cab^2) / (1 + k3 cab + k4 cab^2)
    The denominator is not guarded: with the default coefficients it remains positive but drops to about 0.03 around
    cab = 0.87, where the ratio becomes very high (see resistance_denominator_minimum()).
    :param cab: the concentration ratio, scalar or array
    :param printing_warnings: if True, a warning is printed when the result is not finite
    :return: the dimensionless resistance ratio
    """
    cab = np.asarray(cab, dtype=float)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        ratio = (1. + K1 * cab + K2 * cab * cab) / (1. + K3 * cab + K4 * cab * cab)

    if printing_warnings:
        _warn_if_not_finite("phloem resistance ratio", cab, ratio)

    return as_output(ratio)


def pressure_ratio(cab, printing_warnings=False):
    """
    This function computes the osmotic pressure ratio P/RT as a quadratic function of the concentration ratio cab.
    :param cab: the concentration ratio, scalar or array
    :param printing_warnings: if True, a warning is printed when the result is not finite
    :return: the dimensionless pressure ratio
    """
    cab = np.asarray(cab, dtype=float)

    with np.errstate(over='ignore', invalid='ignore'):
        ratio = PRESSURE_A + PRESSURE_B * cab + PRESSURE_C * cab * cab

    if printing_warnings:
        _warn_if_not_finite("osmotic pressure ratio", cab, ratio)

    return as_output(ratio)


def resistance_denominator_minimum(k3=K3, k4=K4):
    """
    Returns the concentration ratio at which the denominator 1 + k3 cab + k4 cab^2 of the resistance ratio is the
    smallest, and the value of the denominator there.
    :raise ValueError: If k4 <= 0, since the denominator then has no minimum.
    """
    if k4 <= 0.:
        raise ValueError("The denominator 1 + k3 cab + k4 cab^2 has no minimum for k4 = %s!" % k4)

    cab_min = -k3 / (2. * k4)
    return cab_min, 1. + k3 * cab_min + k4 * cab_min ** 2


def resistance_ratio_diverges(k3=K3, k4=K4):
    """
    Returns True if the denominator 1 + k3 cab + k4 cab^2 of the resistance ratio vanishes for some real concentration
    ratio, i.e. if the resistance ratio diverges there.
    """
    # Linear denominator 1 + k3 cab:
    if k4 == 0.:
        return k3 != 0.
    return k3 * k3 - 4. * k4 >= 0.
