# -*- coding: utf-8 -*-
"""
Thin wrapper around the CoolProp low-level interface. Every property needed by the
shell-and-tube calculations is evaluated from a (pressure, temperature) pair, the state
the streams are described with.

@author: smcanana
"""
from enum import StrEnum
import logging
import CoolProp as CP

class BackEnd(StrEnum):
    """
    CoolProp back ends usable by the fluids of this library
    """
    HEOS = "HEOS"
    TTSEHEOS = "TTSE&HEOS"
    BICUBICHEOS = "BICUBIC&HEOS"
    REFPROP = "REFPROP"
    SRK = "SRK"
    PR = "PR"
    INCOMP = "INCOMP"

class AbstractStateWrapper():
    """
    Holds one CoolProp AbstractState per fluid and evaluates transport and caloric
    properties on it. CoolProp raises ValueError for states outside the validity range of
    the fluid; those are left to propagate so the solver can report them.
    """
    def __init__(self, backEnd: str, fluid: str, massFraction: float=1.0):
        self.logger = logging.getLogger("AbstractStateWrapper")
        self.name = fluid
        self.backEnd = backEnd
        self.abstractState = CP.AbstractState(backEnd, fluid)
        self.massFractions = {self.name: massFraction}
        if massFraction < 1.0: self.setMassFraction(massFraction)

    def setMassFraction(self, massFraction):
        """
        Sets the solute fraction of an incompressible solution, e.g. 0.3 for MEG-30%.
        """
        self.massFractions = {self.name: massFraction, 'Water': 1.0 - massFraction}
        self.abstractState.set_mass_fractions([massFraction])

    def calculateCriticalPressure(self):
        """
        Critical pressure in Pa, None for fluids without a critical point (incompressible
        solutions).
        """
        try:
            return self.abstractState.p_critical()
        except ValueError:
            self.logger.info("Could not find critical pressure for %s", self.name,
                             extra={"methodname": self.calculateCriticalPressure.__name__})
            return None

    def calculateMassMolar(self):
        """
        Molar mass in kg/mol, None when the back end does not define one.
        """
        try:
            return self.abstractState.molar_mass()
        except ValueError:
            self.logger.info("Molar mass cannot be calculated by CoolProp for %s", self.name,
                             extra={"methodname": self.calculateMassMolar.__name__})
            return None

    def _updatePandT(self, pressure, temperature):
        self.abstractState.update(CP.PT_INPUTS, pressure, temperature)

    def calculateDensityFromPandT(self, pressure, temperature):
        """
        Mass density in kg/m^3 at pressure (Pa) and temperature (K).
        """
        self._updatePandT(pressure, temperature)
        return self.abstractState.rhomass()

    def calculateViscosityFromPandT(self, pressure, temperature):
        """
        Dynamic viscosity in Pa*s at pressure (Pa) and temperature (K).
        """
        self._updatePandT(pressure, temperature)
        return self.abstractState.viscosity()

    def calculateHeatCapacityFromPandT(self, pressure, temperature):
        """
        Isobaric specific heat in J/kg/K at pressure (Pa) and temperature (K).
        """
        self._updatePandT(pressure, temperature)
        return self.abstractState.cpmass()

    def calculateConductivityFromPandT(self, pressure, temperature):
        """
        Thermal conductivity in W/m/K at pressure (Pa) and temperature (K).
        """
        self._updatePandT(pressure, temperature)
        return self.abstractState.conductivity()

    def calculateEnthalpyFromPandT(self, pressure, temperature):
        """
        Specific enthalpy in J/kg at pressure (Pa) and temperature (K).
        """
        self._updatePandT(pressure, temperature)
        return self.abstractState.hmass()

    def calculateTempFromHandP(self, enthalpy, pressure):
        """
        Inverts the caloric equation of state: temperature in K of the state with the given
        specific enthalpy (J/kg) and pressure (Pa), the inverse of
        calculateEnthalpyFromPandT.
        """
        self.abstractState.update(CP.HmassP_INPUTS, enthalpy, pressure)
        return self.abstractState.T()

