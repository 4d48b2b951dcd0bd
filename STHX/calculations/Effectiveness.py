# -*- coding: utf-8 -*-
"""
Effectiveness relations of the effectiveness-NTU method, Incropera and DeWitt, Fundamentals
of Heat and Mass Transfer, 6th Ed., Table 11.3.

The relations are written with exponentials rather than the logarithms of the LMTD method,
so they stay defined when a solver tries outlet temperatures that cross over.

Inputs are not checked: ntu must not be negative and capacityRatio must be in [0, 1]. The
relations with a 0/0 form at capacityRatio == 1 use their limit there.
"""
from enum import StrEnum
import numpy as np

class HEXArrangement(StrEnum):
    """
    Flow arrangement of the heat exchanger, selects the effectiveness relation
    """
    PARALLEL = "Concentric tube, parallel flow"
    COUNTER = "Concentric tube, counter flow"
    SHELL_ONE_PASS = "Shell and tube, one shell pass"
    SHELL_N_PASS = "Shell and tube, n shell passes"
    CR_ZERO = "Cmin fluid boiling or condensing"

def effectivenessParallel(ntu, capacityRatio):
    return (1 - np.exp(-ntu*(1 + capacityRatio)))/(1 + capacityRatio)

def effectivenessCounter(ntu, capacityRatio):
    if capacityRatio == 1:
        return ntu/(1 + ntu)
    # exponent is -NTU(1 - Cr); written with (1 + Cr) the relation would not approach the
    # NTU/(1 + NTU) branch above as Cr -> 1
    expTerm = np.exp(-ntu*(1 - capacityRatio))
    return (1 - expTerm)/(1 - capacityRatio*expTerm)

def effectivenessShellOnePass(ntu, capacityRatio):
    """One shell pass and 2, 4, ... tube passes"""
    root = np.sqrt(1 + capacityRatio**2)
    expTerm = np.exp(-ntu*root)
    return 2/(1 + capacityRatio + root*(1 + expTerm)/(1 - expTerm))

def effectivenessShellNPass(ntu, capacityRatio, numShellPasses=2):
    """
    n shell passes and 2n, 4n, ... tube passes. The total ntu is used for each shell pass,
    as in the reference table.
    """
    effectivenessOnePass = effectivenessShellOnePass(ntu, capacityRatio)
    if capacityRatio == 1:
        return numShellPasses*effectivenessOnePass/(1 + (numShellPasses - 1)*effectivenessOnePass)
    term = ((1 - effectivenessOnePass*capacityRatio)/(1 - effectivenessOnePass))**numShellPasses
    return (term - 1)/(term - capacityRatio)

def effectivenessCrZero(ntu, capacityRatio=0.0):
    """All arrangements when the Cmin fluid changes phase, capacityRatio is ignored"""
    return 1 - np.exp(-ntu)

def calculateEffectiveness(ntu, capacityRatio, arrangement: HEXArrangement, numShellPasses=2):
    """
    Calculates the effectiveness of the heat exchanger

    Parameters
    ----------
    ntu : float
        number of transfer units, UA/Cmin.
    capacityRatio : float
        Cmin/Cmax.
    arrangement : HEXArrangement
        flow arrangement of the heat exchanger.
    numShellPasses : int, optional
        number of shell passes, only used by HEXArrangement.SHELL_N_PASS. The default is 2.

    Raises
    ------
    NotImplementedError
        No relation exists for the arrangement.

    Returns
    -------
    float
        effectiveness, heat transferred over the maximum heat that could be transferred.

    """
    match arrangement:
        case HEXArrangement.PARALLEL:
            return effectivenessParallel(ntu, capacityRatio)
        case HEXArrangement.COUNTER:
            return effectivenessCounter(ntu, capacityRatio)
        case HEXArrangement.SHELL_ONE_PASS:
            return effectivenessShellOnePass(ntu, capacityRatio)
        case HEXArrangement.SHELL_N_PASS:
            return effectivenessShellNPass(ntu, capacityRatio, numShellPasses)
        case HEXArrangement.CR_ZERO:
            return effectivenessCrZero(ntu, capacityRatio)
        case _:
            raise NotImplementedError(f'No effectiveness relation for {arrangement}')
