#  -*- coding: utf-8 -*-

"""
    openalea.phloem.tools
    ~~~~~~~~~~~~~~~~~~~~~

    The module :mod:`openalea.phloem.tools` defines useful functions around the kinetics and rheology functions:
    printing in files, evaluating tables of nodes and segments, recording results and reading scenarios.

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""

import os
from math import isnan

import numpy as np
import pandas as pd

from .constants import DEFAULT_CONSTANTS
from .errors import InvalidArgument
from .kinetics import SINK, SOURCE, sink_unloading, source_loading, d_carbon_flux_dcp
from .rheology import phloem_resistance_ratio, pressure_ratio


# FUNCTIONS FOR PRINTING IN FILES:
##################################

def f_init(filename, format, *args):
    """
    This function creates the file [filename] (or erases its content if it already exists) and writes the text
    [format], formatted with the optional arguments using %-formatting.
    """
    with open(filename, "w+") as stream:
        stream.write(format % args)


def f_printf(filename, format, *args):
    """
    This function appends the text [format], formatted with the optional arguments, at the end of the file [filename].
    """
    with open(filename, "a+") as stream:
        stream.write(format % args)


# FUNCTIONS FOR EVALUATING NODES AND SEGMENTS:
##############################################

def node_fluxes(nodes):
    """
    This function computes the carbon flux and its derivative with respect to the carbon potential for each node of
    a table. Sink and source nodes are evaluated together.
    :param nodes: a dataframe with the columns 'cp' (carbon potential), 'q' (kinetic parameter) and 'role' ("Sink" or
    "Source")
    :return: a copy of the dataframe with the new columns 'flux' and 'dflux_dcp'
    """
    df = nodes.copy()

    # We check that each node is either a sink or a source:
    unknown_roles = set(df["role"]) - {SINK, SOURCE}
    if unknown_roles:
        raise InvalidArgument("The role of a node must be either '%s' or '%s', got %s!"
                              % (SINK, SOURCE, sorted(unknown_roles)))

    cp = df["cp"].to_numpy(dtype=float)
    q = df["q"].to_numpy(dtype=float)
    is_source = (df["role"] == SOURCE).to_numpy()

    df["flux"] = np.where(is_source, source_loading(cp, q), sink_unloading(cp, q))
    df["dflux_dcp"] = d_carbon_flux_dcp(cp, q)

    return df


def segment_ratios(segments, printing_warnings=False):
    """
    This function computes the phloem resistance ratio and the osmotic pressure ratio for each segment of a table.
    :param segments: a dataframe with the column 'cab' (concentration ratio)
    :param printing_warnings: if True, a warning is printed when a ratio is not finite
    :return: a copy of the dataframe with the new columns 'resistance_ratio' and 'pressure_ratio'
    """
    df = segments.copy()
    cab = df["cab"].to_numpy(dtype=float)

    df["resistance_ratio"] = phloem_resistance_ratio(cab, printing_warnings=printing_warnings)
    df["pressure_ratio"] = pressure_ratio(cab, printing_warnings=printing_warnings)

    return df


def flux_curve(q=1., cp_max=10., n_points=101):
    """
    This function tabulates the sink and source functions, and their common derivative, for a given kinetic parameter
    over a regular grid of carbon potential between 0 and [cp_max].
    """
    cp = np.linspace(0., cp_max, n_points)

    return pd.DataFrame({"cp": cp,
                         "c": np.sqrt(2. * cp),
                         "sink_unloading": sink_unloading(cp, q),
                         "source_loading": source_loading(cp, q),
                         "dflux_dcp": d_carbon_flux_dcp(cp, q)})


# FUNCTIONS FOR RECORDING RESULTS AND READING SCENARIOS:
########################################################

def recording_results(df, outputs_dirpath="outputs", file_name="results.csv"):
    """
    This function records a dataframe as a CSV file in [outputs_dirpath], which is created if it doesn't exist.
    :return: the path of the recorded file
    """
    if not os.path.exists(outputs_dirpath):
        os.makedirs(outputs_dirpath)

    file_path = os.path.join(outputs_dirpath, file_name)
    print("Recording", len(df), "lines in", file_path, "...")
    df.to_csv(file_path, na_rep='NA', index=False)

    return file_path


def read_scenario(scenarios_file, scenario_id=1, constants=DEFAULT_CONSTANTS):
    """
    This function reads the instructions of the scenario [scenario_id] in the CSV file [scenarios_file], where one
    scenario corresponds to one line identified in the column 'Scenario'. For missing instructions, the values of
    [constants] are kept.
    :return: a SimulationConstants object corresponding to the scenario
    """
    if os.path.splitext(scenarios_file)[1] != ".csv":
        raise ValueError("The extension of the scenarios file '%s' has not been recognized (.csv)!" % scenarios_file)

    scenarios_df = pd.read_csv(scenarios_file, index_col='Scenario')
    scenario = scenarios_df.loc[scenario_id].to_dict()

    # Empty cells correspond to instructions that were not given:
    scenario = {name: value for name, value in scenario.items()
                if not (isinstance(value, float) and isnan(value))}

    return constants.apply_scenario(**scenario)
