# -*- coding: utf-8 -*-
"""
Created on Wed Jan 10 08:16:00 2024

@author: smcanana
"""
from dataclasses import dataclass, field
import logging
import numpy as np
from STHX.models.Geometry import Pipe
from STHX.calculations.Effectiveness import HEXArrangement

logger = logging.getLogger("HeatExchanger")

@dataclass(frozen=True)
class HeatExchanger():
    r"""
    Shell-and-tube heat exchanger.

    The shell is kept as given and, in shellFlow, as the passage left free around the tube
    bundle:

        areaFlow = shell.areaFlow - numTubes*tube.areaTotal
        perimeterWetted = pi*shell.innerDiam + numTubes*pi*tube.outerDiam
        diameterHydraulic = 4*areaFlow/perimeterWetted

    shellFlow is worked out once, on construction. To change the geometry build a new
    HeatExchanger.

    Parameters
    ----------
    shell : Pipe
        shell, as a pipe.
    tube : Pipe
        a single tube of the bundle.
    numTubes : int
        number of tubes in the bundle.
    baffleSpacing : float
        distance between baffles in m.
    baffleCut : float
        baffle cut as a fraction of the shell diameter.
    arrangement : HEXArrangement
        flow arrangement, selects the effectiveness relation.
    numShellPasses : int, optional
        number of shell passes for HEXArrangement.SHELL_N_PASS. The default is 2.
    """
    shell: Pipe
    tube: Pipe
    numTubes: int
    baffleSpacing: float
    baffleCut: float
    arrangement: HEXArrangement
    numShellPasses: int = 2
    shellFlow: Pipe = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        assert self.numTubes >= 1, "Number of tubes must be at least 1"
        assert self.numShellPasses >= 1, "Number of shell passes must be at least 1"
        assert self.baffleSpacing >= 0, "Baffle spacing cannot be negative"
        assert 0 <= self.baffleCut < 1, "Baffle cut must be between 0 and 1"
        areaFlow = self.calculateAreaFlowShell()
        assert areaFlow > 0, "Tube bundle does not fit in the shell"
        diameterHydraulic = 4*areaFlow/self.calculatePerimeterWettedShell()
        object.__setattr__(self, "shellFlow", self.shell.withFlowPassage(diameterHydraulic, areaFlow))
        logger.debug("shell side areaFlow: %g, diameterHydraulic: %g", areaFlow, diameterHydraulic,
                     extra={"methodname": "__post_init__"})

    def calculateAreaFlowShell(self):
        """
        Calculates the area perpendicular to the flow left free around the tube bundle

        Returns
        -------
        float
            free flow area of the shell side in m^2.

        """
        return self.shell.areaFlow - self.numTubes*self.tube.areaTotal

    def calculatePerimeterWettedShell(self):
        """
        Calculates the wetted perimeter of the shell side: the inside of the shell plus the
        outside of every tube

        Returns
        -------
        float
            wetted perimeter of the shell side in m.

        """
        return np.pi*self.shell.innerDiam + self.numTubes*np.pi*self.tube.outerDiam

    def calculateAreaWetted(self, side):
        """
        Calculates the heat transfer area of the tube bundle on the given side of the
        tube wall

        Parameters
        ----------
        side : string
            'inner' (tube side) or 'outer' (shell side).

        Returns
        -------
        float
            heat transfer area in m^2.

        """
        if side == 'inner':
            return np.pi*self.tube.innerDiam*self.tube.length*self.numTubes
        return np.pi*self.tube.outerDiam*self.tube.length*self.numTubes

    def calculateThermalResistanceWall(self, temperature):
        """
        Calculates the conduction resistance of the walls of all tubes in parallel

        Parameters
        ----------
        temperature : float
            temperature at which the wall conductivity is evaluated, in K.

        Returns
        -------
        float
            thermal resistance of the tube walls in K/W.

        """
        return np.log(self.tube.outerDiam/self.tube.innerDiam)/\
            (2*np.pi*self.tube.length*self.tube.thermalConductivity(temperature)*self.numTubes)

    def outputList(self):
        """
            Return a list of parameters for this component for further output

            It is a list of tuples, and each tuple is formed of items:
                [0] Description of value
                [1] Units of value
                [2] The value itself
        """
        return [
            ('Arrangement', '-', str(self.arrangement)),
            ('Number of tubes', '-', self.numTubes),
            ('Tube length', 'm', self.tube.length),
            ('Tube inner diameter', 'm', self.tube.innerDiam),
            ('Tube outer diameter', 'm', self.tube.outerDiam),
            ('Shell inner diameter', 'm', self.shell.innerDiam),
            ('Shell side flow area', 'm^2', self.shellFlow.areaFlow),
            ('Shell side hydraulic diameter', 'm', self.shellFlow.innerDiam),
            ('Inner heat transfer area', 'm^2', self.calculateAreaWetted('inner')),
            ('Outer heat transfer area', 'm^2', self.calculateAreaWetted('outer')),
            ('Baffle spacing', 'm', self.baffleSpacing),
            ('Baffle cut', '-', self.baffleCut),
        ]
