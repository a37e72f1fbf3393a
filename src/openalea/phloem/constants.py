#  -*- coding: utf-8 -*-

"""
    openalea.phloem.constants
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    The module :mod:`openalea.phloem.constants` defines the numerical constants used by a simulation of carbon
    transport in the phloem network (time step, error thresholds, recording intervals...).

    The constants are gathered in an immutable object that is passed explicitly to the solver, rather than being
    read from global variables. A scenario is created by applying new values on top of the default ones.

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""

from dataclasses import dataclass, field, fields, replace
from math import pi

import pandas as pd
from pint import UnitRegistry
from pint.errors import UndefinedUnitError

from .errors import BadUnitError, BadDefaultError

ureg = UnitRegistry()


def declare(default, unit, description, min_value=None, max_value=None, references=""):
    """
    This function is used to declare a constant in the dataclass, with its unit and a description stored as metadata
    of the field.

    :param default: Default value of the constant if not superimposed by a scenario.
    :param unit: Unit of the constant, as understood by pint.
    :param description: Full description of the constant.
    :param min_value: Lowest acceptable value (None if not bounded).
    :param max_value: Highest acceptable value (None if not bounded).
    :param references: Origin of the value.
    """
    return field(default=default,
                 metadata=dict(unit=unit, description=description, min_value=min_value, max_value=max_value,
                               references=references))


@dataclass(frozen=True)
class SimulationConstants:
    """
    Numerical constants of a simulation.

    :raise BadUnitError: If the unit of a constant is not known by pint.
    :raise BadDefaultError: If the value of a constant lies outside of [min_value, max_value].
    """
    infty: float = declare(default=1e10, unit="dimensionless", description="Very large number", min_value=0.)
    epsilon: float = declare(default=1e-10, unit="dimensionless",
                             description="Very small number different from zero (1 / infty)", min_value=0.)
    time_step: float = declare(default=1. / 24., unit="day", description="Time step of the simulation (1 hour)",
                               min_value=0.)
    max_error: float = declare(default=1e-4, unit="dimensionless",
                               description="Error threshold for evaluating carbon flow", min_value=0.)
    max_error_h: float = declare(default=1e-2, unit="dimensionless",
                                 description="Error threshold for evaluating carbon flow at the coarser level",
                                 min_value=0.)
    env_step: float = declare(default=1., unit="day", description="Interval at which light distribution is computed",
                              min_value=0., references="Keep as 1 day")
    vis_step: float = declare(default=1., unit="day", description="Interval at which the model is visualised",
                              min_value=0.)
    out_step: float = declare(default=1. / 24., unit="day",
                              description="Interval at which the model outputs are written in a file", min_value=0.)
    pi: float = declare(default=pi, unit="dimensionless", description="Pi")

    def __post_init__(self):
        for f in fields(self):
            try:
                ureg.parse_units(f.metadata["unit"])
            except UndefinedUnitError as error:
                raise BadUnitError("Unknown unit '%s' for '%s'" % (f.metadata["unit"], f.name)) from error

            value = getattr(self, f.name)
            min_value = f.metadata["min_value"]
            max_value = f.metadata["max_value"]
            if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
                raise BadDefaultError("The value %s of '%s' is outside of [%s, %s]"
                                      % (value, f.name, min_value, max_value))

    @property
    def documentation(self):
        """Table describing each constant, its current value and its unit."""
        return pd.DataFrame([dict(name=f.name, value=getattr(self, f.name), unit=f.metadata["unit"],
                                  description=f.metadata["description"], references=f.metadata["references"])
                             for f in fields(self)]).set_index("name")

    def quantity(self, name):
        units = {f.name: f.metadata["unit"] for f in fields(self)}
        return ureg.Quantity(getattr(self, name), units[name])

    def in_units(self, name, unit):
        """
        Returns the value of the constant [name] converted into [unit], e.g. in_units("time_step", "hour").
        """
        return self.quantity(name).to(unit).magnitude

    @property
    def time_step_in_seconds(self):
        return self.in_units("time_step", "second")

    def apply_scenario(self, **kwargs):
        """
        Method to superimpose default constants in order to create a scenario.
        Names that do not correspond to a constant are ignored.
        :param kwargs: mapping of existing constants to superimpose.
        :return: a new SimulationConstants object
        """
        names = [f.name for f in fields(self)]
        return replace(self, **{name: value for name, value in kwargs.items() if name in names})


DEFAULT_CONSTANTS = SimulationConstants()
