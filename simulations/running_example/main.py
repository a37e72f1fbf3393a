# Importation of functions from the system:
###########################################

import os
import timeit

import pandas as pd

from openalea.phloem import tools
from openalea.phloem.constants import DEFAULT_CONSTANTS

# RUNNING THE EXAMPLE:
######################

if __name__ == "__main__":

    # -- OUTPUTS DIRECTORY --
    # We define the path of the directory that will contain the outputs:
    outputs_dirpath = 'outputs'
    if not os.path.exists(outputs_dirpath):
        # We create it:
        os.mkdir(outputs_dirpath)
    else:
        # Otherwise, we delete all the files that are already present inside:
        for root, dirs, files in os.walk(outputs_dirpath):
            for file in files:
                os.remove(os.path.join(root, file))

    # We record the time when the run starts:
    start_time = timeit.default_timer()

    # We read the constants of the first scenario if a list of scenarios is provided:
    scenarios_file = os.path.join('inputs', 'scenarios_list.csv')
    if os.path.exists(scenarios_file):
        constants = tools.read_scenario(scenarios_file, scenario_id=1)
    else:
        constants = DEFAULT_CONSTANTS
    print("The time step is", constants.time_step_in_seconds, "s.")
    print(constants.documentation)

    # We describe a few nodes of the phloem network, with a leaf loading sugars and two competing sinks:
    nodes = pd.DataFrame({"node": ["leaf", "apex", "storage"],
                          "role": ["Source", "Sink", "Sink"],
                          "cp": [2., 0.5, 0.5],
                          "q": [1., 0.1, 1.]})
    # And the segments linking them:
    segments = pd.DataFrame({"segment": ["leaf-apex", "leaf-storage"],
                             "cab": [0.3, 0.5]})

    print("Computing fluxes and phloem properties ...")
    fluxes = tools.node_fluxes(nodes)
    ratios = tools.segment_ratios(segments, printing_warnings=True)
    print(fluxes)
    print(ratios)

    # We record the results:
    tools.recording_results(fluxes, outputs_dirpath=outputs_dirpath, file_name='node_fluxes.csv')
    tools.recording_results(ratios, outputs_dirpath=outputs_dirpath, file_name='segment_ratios.csv')
    tools.recording_results(tools.flux_curve(q=1.), outputs_dirpath=outputs_dirpath, file_name='flux_curve.csv')

    # We also keep a summary in a text file:
    summary_file = os.path.join(outputs_dirpath, 'summary.txt')
    tools.f_init(summary_file, "node\trole\tflux\tdflux_dcp\n")
    for row in fluxes.itertuples():
        tools.f_printf(summary_file, "%s\t%s\t%.6f\t%.6f\n", row.node, row.role, row.flux, row.dflux_dcp)

    elapsed_time = timeit.default_timer() - start_time
    print("Done! The run took", round(elapsed_time, 3), "s.")
