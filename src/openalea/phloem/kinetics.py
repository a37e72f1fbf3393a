#  -*- coding: utf-8 -*-

"""
    openalea.phloem.kinetics
    ~~~~~~~~~~~~~~~~~~~~~~~~

    The module :mod:`openalea.phloem.kinetics` defines the sink and source functions of the phloem network, i.e. the
    unloading and loading of carbon at each node expressed as Michaelis-Menten functions of the carbon potential,
    together with their derivatives with respect to the carbon potential.

    The carbon potential cp is defined as cp = c^2 / 2, where c is the carbon concentration at the node (g C cm-3).

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""

import numpy as np

from .errors import InvalidArgument

# Offset added to the concentration in the denominator of the derivative, to avoid dividing by 0 when c tends to 0:
DERIVATIVE_OFFSET = 0.001

SINK = "Sink"
SOURCE = "Source"


def _checked_concentration(cp, q):
    """
    This function checks the carbon potential and the kinetic parameter and returns the corresponding carbon
    concentration c = sqrt(2 * cp), along with q as an array.
    :param cp: the carbon potential (g2 C cm-6), scalar or array
    :param q: the kinetic parameter (g C cm-3), scalar or array
    :return: a tuple (c, q) of numpy arrays
    """
    cp = np.asarray(cp, dtype=float)
    q = np.asarray(q, dtype=float)

    # We refuse values outside the domain of the square root and of the Michaelis-Menten ratio:
    if np.any(cp < 0.):
        raise InvalidArgument("The carbon potential must be positive or null, got %s!" % cp)
    # An infinite potential would give inf / inf in the fluxes:
    if np.any(np.isinf(cp)):
        raise InvalidArgument("The carbon potential must be finite, got %s!" % cp)
    if np.any(q <= 0.):
        raise InvalidArgument("The kinetic parameter q must be strictly positive, got %s!" % q)

    return np.sqrt(2. * cp), q


def as_output(value):
    """Returns a plain float for a scalar value, and the array itself otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value


def sink_unloading(cp, q):
    """
    This function computes the unloading of carbon at a sink node as a Michaelis-Menten function of the carbon
    concentration, c / (q + c). The result lies in [0, 1) and increases with cp.
    :param cp: the carbon potential cp = c^2 / 2 (g2 C cm-6)
    :param q: the priority parameter of the sink (g C cm-3)
    :return: the relative unloading flux
    """
    c, q = _checked_concentration(cp, q)
    return as_output(c / (q + c))


def source_loading(cp, q):
    """
    This function computes the loading of carbon at a source node, -1 + c / (q + c). The result lies in [-1, 0) and
    increases with cp, the negative sign corresponding to an export of carbon into the phloem.
    The loading is evaluated as -q / (q + c), which is the same value but keeps its precision when c is much larger
    than q.
    :param cp: the carbon potential cp = c^2 / 2 (g2 C cm-6)
    :param q: the loading rate parameter of the source (g C cm-3)
    :return: the relative loading flux
    """
    c, q = _checked_concentration(cp, q)
    return as_output(-q / (q + c))


def d_carbon_flux_dcp(cp, q):
    """
    This function computes the derivative of the sink unloading and source loading functions with respect to cp.
    Both functions only differ by a constant, so that they share this derivative:
        df/dcp = (df/dc) * (dc/dcp) = q / (q + c)^2 * (1 / c)
    An offset of 0.001 is added to c in the last factor to avoid dividing by 0 when c tends to 0.
    :param cp: the carbon potential cp = c^2 / 2 (g2 C cm-6)
    :param q: the kinetic parameter (g C cm-3)
    :return: the derivative of the flux with respect to cp
    """
    c, q = _checked_concentration(cp, q)
    return as_output(q / ((q + c) * (q + c) * (c + DERIVATIVE_OFFSET)))


d_sink_unloading_dcp = d_carbon_flux_dcp
d_source_loading_dcp = d_carbon_flux_dcp

# Flux function associated to each role of a node:
FLUX_FUNCTIONS = {SINK: sink_unloading, SOURCE: source_loading}


def carbon_flux(cp, q, role=SINK):
    """
    This function returns the flux at a node and its derivative with respect to cp, i.e. the pair of values used by
    a Newton-like solver to assemble the carbon balance of the network.
    :param cp: the carbon potential (g2 C cm-6)
    :param q: the kinetic parameter (g C cm-3)
    :param role: either "Sink" or "Source"
    :return: a tuple (flux, dflux_dcp)
    """
    if role not in FLUX_FUNCTIONS:
        raise InvalidArgument("The role of a node must be either '%s' or '%s', got '%s'!" % (SINK, SOURCE, role))

    return FLUX_FUNCTIONS[role](cp, q), d_carbon_flux_dcp(cp, q)
