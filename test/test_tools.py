#  -*- coding: utf-8 -*-

"""
    The script 'test_tools' checks the printing functions and the evaluation of tables of nodes and segments.

    :copyright: see AUTHORS.
    :license: see LICENSE for details.
"""

import os

import numpy as np
import pandas as pd
import pytest

from openalea.phloem import tools
from openalea.phloem.errors import InvalidArgument
from openalea.phloem.kinetics import sink_unloading, source_loading, d_carbon_flux_dcp
from openalea.phloem.rheology import phloem_resistance_ratio, pressure_ratio

PRECISION = 6
RELATIVE_TOLERANCE = 10 ** -PRECISION


def test_printing_in_files(tmp_path):
    file_path = str(tmp_path / "carbon_flow.txt")

    tools.f_init(file_path, "time\tflux\n")
    tools.f_printf(file_path, "%.2f\t%.4f\n", 0.5, 2. / 3.)
    tools.f_printf(file_path, "100%% unloaded\n")
    with open(file_path) as f:
        assert f.read() == "time\tflux\n0.50\t0.6667\n100% unloaded\n"

    # A new initialization erases the previous content:
    tools.f_init(file_path, "%s\n", "restart")
    with open(file_path) as f:
        assert f.read() == "restart\n"


def test_node_fluxes():
    nodes = pd.DataFrame({"cp": [2., 2., 0.5], "q": [1., 1., 0.1], "role": ["Sink", "Source", "Sink"]})
    results = tools.node_fluxes(nodes)

    np.testing.assert_allclose(results["flux"], [sink_unloading(2., 1.), source_loading(2., 1.),
                                                 sink_unloading(0.5, 0.1)], rtol=RELATIVE_TOLERANCE)
    np.testing.assert_allclose(results["dflux_dcp"], d_carbon_flux_dcp(nodes["cp"].to_numpy(), nodes["q"].to_numpy()),
                               rtol=RELATIVE_TOLERANCE)
    # The input table is not modified:
    assert "flux" not in nodes.columns


def test_node_fluxes_refuses_unknown_roles_and_negative_potentials():
    with pytest.raises(InvalidArgument):
        tools.node_fluxes(pd.DataFrame({"cp": [1.], "q": [1.], "role": ["Storage"]}))
    with pytest.raises(InvalidArgument):
        tools.node_fluxes(pd.DataFrame({"cp": [-1.], "q": [1.], "role": ["Sink"]}))


def test_segment_ratios():
    segments = pd.DataFrame({"cab": [0., 0.5, 1.]})
    results = tools.segment_ratios(segments)
    np.testing.assert_allclose(results["resistance_ratio"], phloem_resistance_ratio(segments["cab"].to_numpy()))
    np.testing.assert_allclose(results["pressure_ratio"], pressure_ratio(segments["cab"].to_numpy()))
    assert results["resistance_ratio"].iloc[0] == 1.


def test_flux_curve():
    curve = tools.flux_curve(q=1., cp_max=2., n_points=5)
    assert list(curve.columns) == ["cp", "c", "sink_unloading", "source_loading", "dflux_dcp"]
    assert curve["cp"].iloc[-1] == 2.
    np.testing.assert_allclose(curve["sink_unloading"].iloc[-1], 2. / 3., rtol=RELATIVE_TOLERANCE)
    np.testing.assert_allclose(curve["source_loading"] - curve["sink_unloading"], -1., rtol=RELATIVE_TOLERANCE)


def test_recording_results(tmp_path, capsys):
    outputs_dirpath = str(tmp_path / "outputs")
    df = tools.flux_curve(n_points=3)
    file_path = tools.recording_results(df, outputs_dirpath=outputs_dirpath, file_name="flux_curve.csv")

    assert os.path.exists(file_path)
    assert "Recording" in capsys.readouterr().out
    pd.testing.assert_frame_equal(pd.read_csv(file_path), df)


def test_read_scenario(tmp_path):
    scenarios_file = str(tmp_path / "scenarios_list.csv")
    pd.DataFrame({"Scenario": [1, 2],
                  "time_step": [0.1, np.nan],
                  "max_error": [1e-6, 1e-3]}).to_csv(scenarios_file, index=False)

    first = tools.read_scenario(scenarios_file, scenario_id=1)
    assert first.time_step == 0.1
    assert first.max_error == 1e-6

    # Empty cells keep the default values:
    second = tools.read_scenario(scenarios_file, scenario_id=2)
    np.testing.assert_allclose(second.time_step, 1. / 24.)
    assert second.max_error == 1e-3


def test_read_scenario_refuses_other_formats():
    with pytest.raises(ValueError):
        tools.read_scenario("scenarios_list.xlsx")
