# -*- coding: utf-8 -*-
"""
Dimensionless groups and Nusselt number correlations for the shell and tube sides.

Every correlation has the signature correlation(flowStream, tempWall) -> Nusselt number,
where flowStream is a FlowStream and tempWall an estimate of the wall temperature in K. The
wall temperature is part of the signature because correlations with property corrections
at the wall need it; none of the ones below use it.
"""
from enum import StrEnum
from types import MappingProxyType
import logging
import numpy as np

logger = logging.getLogger("Correlations")

class FluidMechanics():
    """
    Class for calculations of dimensionless numbers used to characterize fluids
    """
    @staticmethod
    def calculateReynoldsNumber(flowSpeed, length, viscosity, density=None):
        """
        Reynolds number rho*v*L/mu. Without density, viscosity is taken as the kinematic
        viscosity in m^2/s and the number is v*L/nu.
        """
        if not density:
            return flowSpeed*length/viscosity
        return density*flowSpeed*length/viscosity

    @staticmethod
    def calculatePrandtlNumber(specificHeat, viscosity, conductivity):
        """
        Prandtl number cp*mu/k, with cp in J/kg/K, mu in Pa*s and k in W/m/K.
        """
        return specificHeat*viscosity/conductivity

    @staticmethod
    def calculatePecletNumber(reynoldsNum, prandtlNum):
        return reynoldsNum*prandtlNum

    @staticmethod
    def calculateChurchillFrictionFactor(reynoldsNum, roughnessRatio=0.0):
        """
        Calculates friction factor of Churchill (Darcy friction factor where f_laminar=64/Re),
        valid over laminar, transitional and turbulent flow.

        Parameters
        ----------
        reynoldsNum : float
            Reynolds number of fluid.
        roughnessRatio : float, optional
            surface roughness divided by hydraulic diameter. The default is 0.0.

        Returns
        -------
        churchillFrictionFactor: float
            Churchill friction factor.

        """
        varA = (-2.457*np.log((7.0/reynoldsNum)**0.9 + 0.27*roughnessRatio))**16
        varB = (37530.0/reynoldsNum)**16
        return 8.0*((8.0/reynoldsNum)**12.0 + 1/(varA + varB)**1.5)**(1/12)

    @staticmethod
    def calculateGnielinskiNusselt(frictionFactorDarcy, reynoldsNum, prandtlNum):
        """
        Calculates the Nusselt number of Gnielinski given a Darcy friction factor,
        Reynolds number, and Prandtl number

        Returns
        -------
        nusseltNum : float
            Nusselt number of fluid (dimensionless).

        """
        return (frictionFactorDarcy/8.0)*(reynoldsNum - 1000)*prandtlNum/\
            (1 + 12.7*np.sqrt(frictionFactorDarcy/8.0)*(prandtlNum**(2/3) - 1))

def liquidMetalSkupinski(flowStream, tempWall):
    """
    Heat transfer correlation for liquid metals with a uniform heat flux through the heat
    transfer surface. Skupinski et al., Int. Journal of Heat and Mass Transfer, Vol 8 p. 937,
    1965. Valid for Re between 3600 and 90500 and Pe between 100 and 10000; outside that
    range the value is still returned.
    """
    reynoldsNum = flowStream.reynoldsNum
    pecletNum = flowStream.pecletNum
    if not (3600 <= reynoldsNum <= 90500 and 100 <= pecletNum <= 10000):
        logger.debug("Skupinski correlation used outside its range, Re: %g, Pe: %g",
                     reynoldsNum, pecletNum, extra={"methodname": "liquidMetalSkupinski"})
    return 4.82 + 0.0185*pecletNum**0.827

def gnielinski(flowStream, tempWall):
    """
    Gnielinski heat transfer correlation, the workhorse for turbulent convective heat
    transfer through a tube.
    """
    return FluidMechanics.calculateGnielinskiNusselt(flowStream.frictionFactor,
                                                     flowStream.reynoldsNum, flowStream.prandtlNum)

def moltenSaltShell(flowStream, tempWall):
    """
    Molten salt flowing through the shell side of a segmental-baffled shell-and-tube heat
    exchanger. B.-C. Du et al., International Journal of Heat and Mass Transfer 113 (2017)
    456-465
    """
    return 0.0676*flowStream.reynoldsNum**0.70413*flowStream.prandtlNum**0.4

def laminarTube(flowStream, tempWall):
    """
    Laminar, fully developed flow in a tube with a wall at constant heat flux
    """
    return 4.36

class NusseltCorrelation(StrEnum):
    """
    Identifiers of the available Nusselt number correlations
    """
    LIQUID_METAL = "Liquid metal (Skupinski)"
    GNIELINSKI = "Gnielinski"
    MOLTEN_SALT_SHELL = "Molten salt shell side (Du)"
    LAMINAR_TUBE = "Laminar tube"

def correlationFunction(correlation: NusseltCorrelation):
    """
    Maps a correlation identifier to the function implementing it

    Raises
    ------
    NotImplementedError
        No function exists for the identifier.

    """
    match correlation:
        case NusseltCorrelation.LIQUID_METAL:
            return liquidMetalSkupinski
        case NusseltCorrelation.GNIELINSKI:
            return gnielinski
        case NusseltCorrelation.MOLTEN_SALT_SHELL:
            return moltenSaltShell
        case NusseltCorrelation.LAMINAR_TUBE:
            return laminarTube
        case _:
            raise NotImplementedError(f'No correlation called {correlation}')

DEFAULT_CORRELATIONS = MappingProxyType({
    ("Sodium", "shell"): NusseltCorrelation.LIQUID_METAL,
    ("Sodium", "tube"): NusseltCorrelation.LIQUID_METAL,
    ("NaK", "shell"): NusseltCorrelation.LIQUID_METAL,
    ("NaK", "tube"): NusseltCorrelation.LIQUID_METAL,
    ("Lead", "shell"): NusseltCorrelation.LIQUID_METAL,
    ("Lead", "tube"): NusseltCorrelation.LIQUID_METAL,
    ("FLiBe", "shell"): NusseltCorrelation.MOLTEN_SALT_SHELL,
    ("FLiNaK", "shell"): NusseltCorrelation.MOLTEN_SALT_SHELL,
    ("Solar Salt", "shell"): NusseltCorrelation.MOLTEN_SALT_SHELL,
})

def getCorrelation(flowStream, side="shell", registry=DEFAULT_CORRELATIONS):
    """
    Finds the correlation registered for the substance of the flow stream on the given side

    Parameters
    ----------
    flowStream : FlowStream
        flow stream whose substance name is looked up.
    side : str, optional
        "shell" or "tube". The default is "shell".
    registry : Mapping, optional
        (substance name, side) -> NusseltCorrelation or correlation function.
        The default is DEFAULT_CORRELATIONS.

    Returns
    -------
    function
        the registered correlation, gnielinski if there is none.

    """
    correlation = registry.get((flowStream.stream.substanceName, side))
    if correlation is None:
        return gnielinski
    if isinstance(correlation, NusseltCorrelation):
        return correlationFunction(correlation)
    return correlation
