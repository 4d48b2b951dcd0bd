# -*- coding: utf-8 -*-
"""
Fluid streams entering and leaving the heat exchanger, and the same streams paired with the
pipe or duct they flow through.

@author: smcanana
"""
from dataclasses import dataclass, replace
from functools import cached_property
from scipy.constants import g
from STHX.models.Fluid import ThermoProps
from STHX.models.Geometry import Pipe
from STHX.calculations.Correlations import FluidMechanics

@dataclass(frozen=True)
class Stream():
    """
    State of a fluid stream: substance, mass flow in kg/s, pressure in Pa and temperature in K.

    Properties are evaluated from pressure and temperature when first asked for and kept for
    the lifetime of the instance. A stream at another state is a new Stream.
    """
    fluid: object
    massFlow: float
    pressure: float
    temperature: float

    def __post_init__(self):
        assert self.massFlow > 0, "Mass flow of a stream must be positive"

    @property
    def substanceName(self):
        return self.fluid.name

    @cached_property
    def density(self):
        return self.fluid.calculateDensity(ThermoProps.PT, self.pressure, self.temperature)

    @cached_property
    def viscosity(self):
        return self.fluid.calculateViscosity(ThermoProps.PT, self.pressure, self.temperature)

    @cached_property
    def heatCapacity(self):
        return self.fluid.calculateHeatCapacity(ThermoProps.PT, self.pressure, self.temperature)

    @cached_property
    def conductivity(self):
        return self.fluid.calculateConductivity(ThermoProps.PT, self.pressure, self.temperature)

    @cached_property
    def enthalpy(self):
        """Specific enthalpy in J/kg"""
        return self.fluid.calculateEnthalpy(ThermoProps.PT, self.pressure, self.temperature)

    @property
    def enthalpyFlow(self):
        """Enthalpy carried by the stream in W"""
        return self.massFlow*self.enthalpy

    @property
    def capacityRate(self):
        """Heat capacity rate in W/K"""
        return self.massFlow*self.heatCapacity

    def withMassFlow(self, massFlow):
        return replace(self, massFlow=massFlow)

    def withState(self, pressure, temperature):
        return replace(self, pressure=pressure, temperature=temperature)

@dataclass(frozen=True)
class FlowStream():
    """
    A stream flowing through a pipe. Gives the dimensionless groups of the flow and the
    pressure drop over the whole length of the pipe.
    """
    pipe: Pipe
    stream: Stream

    @property
    def velocity(self):
        return self.stream.massFlow/(self.stream.density*self.pipe.areaFlow)

    @cached_property
    def reynoldsNum(self):
        return FluidMechanics.calculateReynoldsNumber(self.velocity, self.pipe.innerDiam,
                                                      self.stream.viscosity, self.stream.density)

    @cached_property
    def prandtlNum(self):
        return FluidMechanics.calculatePrandtlNumber(self.stream.heatCapacity, self.stream.viscosity,
                                                     self.stream.conductivity)

    @property
    def pecletNum(self):
        return FluidMechanics.calculatePecletNumber(self.reynoldsNum, self.prandtlNum)

    @cached_property
    def frictionFactor(self):
        """Darcy friction factor"""
        return FluidMechanics.calculateChurchillFrictionFactor(self.reynoldsNum,
                                                               self.pipe.roughness/self.pipe.innerDiam)

    @cached_property
    def pressureDrop(self):
        """Frictional plus hydrostatic pressure drop in Pa, positive for a loss"""
        frictional = self.frictionFactor*self.pipe.length/self.pipe.innerDiam*\
            self.stream.density*self.velocity**2/2
        return frictional + self.stream.density*g*self.pipe.elevationChange
