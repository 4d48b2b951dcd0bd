# -*- coding: utf-8 -*-
"""
Pipe and duct descriptions used for both sides of a shell-and-tube heat exchanger.

@author: smcanana
"""
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Callable
import numpy as np
from STHX.calculations.Conversions import GeometricConversions

class WallMaterial(StrEnum):
    """
    Wall materials with a thermal conductivity correlation in W/m/K, temperature in K
    """
    STAINLESS_316 = "Stainless Steel"
    COPPER = "Copper"
    CARBON_STEEL = "Carbon Steel"

    def calculateConductivity(self, temperature):
        match self:
            case WallMaterial.STAINLESS_316:
                # Kim (1975), ANL-75-55, valid 300 K to 1700 K
                return 9.248 + 0.01571*temperature
            case WallMaterial.COPPER:
                return 401.0
            case WallMaterial.CARBON_STEEL:
                return 54.0 - 0.0333*(temperature - 273.15)

# ASME B36.10 nominal pipe sizes: outer diameter and wall thickness per schedule, in inches
PIPE_SCHEDULES = {
    "1/2": (0.840, {"40": 0.109, "80": 0.147}),
    "3/4": (1.050, {"40": 0.113, "80": 0.154}),
    "1": (1.315, {"40": 0.133, "80": 0.179}),
    "1-1/4": (1.660, {"40": 0.140, "80": 0.191}),
    "1-1/2": (1.900, {"40": 0.145, "80": 0.200}),
    "2": (2.375, {"40": 0.154, "80": 0.218}),
    "3": (3.500, {"40": 0.216, "80": 0.300}),
    "4": (4.500, {"40": 0.237, "80": 0.337}),
    "6": (6.625, {"40": 0.280, "80": 0.432}),
    "8": (8.625, {"40": 0.322, "80": 0.500}),
    "10": (10.750, {"40": 0.365, "80": 0.594}),
    "12": (12.750, {"40": 0.406, "80": 0.688}),
}

_FRACTIONAL_SIZES = {0.5: "1/2", 0.75: "3/4", 1.25: "1-1/4", 1.5: "1-1/2"}

def _nominalSizeKey(nominalSize):
    if isinstance(nominalSize, str):
        return nominalSize
    if nominalSize in _FRACTIONAL_SIZES:
        return _FRACTIONAL_SIZES[nominalSize]
    return str(int(nominalSize))

@dataclass(frozen=True)
class Pipe():
    """
    A straight pipe or duct. Lengths are in m, conductivity in W/m/K.

    areaFlow and outerDiam default to the values of a plain circular pipe; they can be given
    explicitly for a passage that is not one, such as the free-flow area of a shell around a
    tube bundle.
    """
    length: float
    innerDiam: float
    thickness: float
    thermalConductivity: Callable[[float], float]
    roughness: float = 1.5e-6
    elevationChange: float = 0.0
    areaFlow: float | None = None
    outerDiam: float | None = None

    def __post_init__(self):
        assert self.length > 0, "Length of pipe must be positive"
        assert self.innerDiam > 0, "Inner diameter of pipe must be positive"
        assert self.thickness >= 0, "Wall thickness of pipe cannot be negative"
        assert self.roughness >= 0, "Surface roughness cannot be negative"
        if self.outerDiam is None:
            object.__setattr__(self, "outerDiam", self.innerDiam + 2*self.thickness)
        if self.areaFlow is None:
            object.__setattr__(self, "areaFlow", np.pi*self.innerDiam**2/4.0)

    @classmethod
    def fromSchedule(cls, nominalSize, schedule, material: WallMaterial, length: float,
                     roughness: float=1.5e-6, elevationChange: float=0.0):
        """
        Builds a pipe from its nominal size and schedule.

        Parameters
        ----------
        nominalSize : str or float
            nominal pipe size in inches, e.g. "1-1/4" or 1.25.
        schedule : str or int
            pipe schedule, "40" or "80".
        material : WallMaterial
            wall material, gives the wall conductivity.
        length : float
            pipe length in m.

        Raises
        ------
        KeyError
            The nominal size or the schedule is not tabulated.

        Returns
        -------
        Pipe

        """
        outerDiamIn, thicknesses = PIPE_SCHEDULES[_nominalSizeKey(nominalSize)]
        thicknessIn = thicknesses[str(schedule)]
        gc = GeometricConversions()
        outerDiam = gc.convertLength(gc.Unit.IN, gc.Unit.M, outerDiamIn)
        thickness = gc.convertLength(gc.Unit.IN, gc.Unit.M, thicknessIn)
        return cls(length=length, innerDiam=outerDiam - 2*thickness, thickness=thickness,
                   thermalConductivity=WallMaterial(material).calculateConductivity,
                   roughness=roughness, elevationChange=elevationChange)

    @property
    def innerRadius(self):
        return self.innerDiam/2

    @property
    def outerRadius(self):
        return self.outerDiam/2

    @property
    def areaTotal(self):
        """Cross-sectional area enclosed by the outer wall"""
        return np.pi*self.outerDiam**2/4.0

    @property
    def perimeterWetted(self):
        return np.pi*self.innerDiam

    def withFlowPassage(self, diameterHydraulic, areaFlow):
        """
        Returns a copy of this pipe carrying flow through a passage of the given hydraulic
        diameter and flow area. Length, wall, roughness and outer dimensions are kept.
        """
        return replace(self, innerDiam=diameterHydraulic, areaFlow=areaFlow,
                       outerDiam=self.outerDiam)
