# -*- coding: utf-8 -*-
"""
Created on Mon Jan  8 11:35:16 2024

@author: smcanana
"""
from enum import StrEnum
from STHX.wrappers.CoolPropWrapper import AbstractStateWrapper, BackEnd

class ThermoProps(StrEnum):
    """
    Thermodynamic properties pair enum. Used to determine which two thermodynamic
    properties will be used in calculation.
    """
    HP = 'enthalpy (J/kg) and pressure (Pa)'
    PT = 'pressure (Pa) and temperature (K)'

class Fluid():
    """
    This class represents a fluid whose properties are evaluated by CoolProp. It is used to
    calculate necessary properties of the fluid.
    """
    def __init__(self, name: str, backEnd: str=BackEnd.HEOS, massFraction: float=1.0):
        self.name = name
        self.backEnd = backEnd
        self.massFraction = massFraction
        self.abstractState = AbstractStateWrapper(backEnd, name, massFraction)
        self.pressureCritical = self.abstractState.calculateCriticalPressure()
        self.massMolar = self.abstractState.calculateMassMolar()

    def __eq__(self, other):
        if not isinstance(other, Fluid):
            return NotImplemented
        return (self.name, self.backEnd, self.massFraction) == \
            (other.name, other.backEnd, other.massFraction)

    def __hash__(self):
        return hash((self.name, str(self.backEnd), self.massFraction))

    def __repr__(self):
        return f"Fluid({self.name!r}, {str(self.backEnd)!r}, massFraction={self.massFraction})"

    def _evaluate(self, quantity, properties: ThermoProps, variable1, variable2):
        """
        Dispatches a property request to the CoolProp wrapper method registered for the
        (quantity, input pair) combination.

        Raises
        ------
        NotImplementedError
            No wrapper method evaluates this quantity from this pair of properties.

        """
        match (quantity, properties):
            case ("temperature", ThermoProps.HP):
                method = self.abstractState.calculateTempFromHandP
            case ("enthalpy", ThermoProps.PT):
                method = self.abstractState.calculateEnthalpyFromPandT
            case ("density", ThermoProps.PT):
                method = self.abstractState.calculateDensityFromPandT
            case ("heatCapacity", ThermoProps.PT):
                method = self.abstractState.calculateHeatCapacityFromPandT
            case ("viscosity", ThermoProps.PT):
                method = self.abstractState.calculateViscosityFromPandT
            case ("conductivity", ThermoProps.PT):
                method = self.abstractState.calculateConductivityFromPandT
            case _:
                raise NotImplementedError(f'Calculating {quantity} from {properties.name} '
                                          'has not yet been implemented')
        return method(variable1, variable2)

    def calculateTemperature(self, properties: ThermoProps, variable1, variable2):
        """
        Temperature in K from the (enthalpy, pressure) pair, the inverse of calculateEnthalpy.
        Other pairs are not supported.
        """
        return self._evaluate("temperature", properties, variable1, variable2)

    def calculateEnthalpy(self, properties: ThermoProps, variable1, variable2):
        """
        Specific enthalpy in J/kg.

        Parameters
        ----------
        properties : ThermoProps
            Pair of thermodynamic properties given, ThermoProps.PT.
        variable1 : float
            pressure in Pa.
        variable2 : float
            temperature in K.

        Returns
        -------
        enthalpy : float
            specific enthalpy in J/kg, on the reference state of the CoolProp back end.

        """
        return self._evaluate("enthalpy", properties, variable1, variable2)

    def calculateDensity(self, properties: ThermoProps, variable1, variable2):
        return self._evaluate("density", properties, variable1, variable2)

    def calculateHeatCapacity(self, properties: ThermoProps, variable1, variable2):
        return self._evaluate("heatCapacity", properties, variable1, variable2)

    def calculateViscosity(self, properties: ThermoProps, variable1, variable2):
        return self._evaluate("viscosity", properties, variable1, variable2)

    def calculateConductivity(self, properties: ThermoProps, variable1, variable2):
        return self._evaluate("conductivity", properties, variable1, variable2)

class ConstantPropertyFluid():
    """
    Fluid with properties that do not depend on its state. Useful for liquid metals and salts
    that CoolProp does not carry, where a single set of properties at the mean temperature is
    good enough, and for hand calculations.

    Enthalpy is linear in temperature, h = cp*(T - temperatureReference).
    """
    def __init__(self, name: str, density: float, viscosity: float, heatCapacity: float,
                 conductivity: float, temperatureReference: float=298.15):
        assert density > 0, "Density must be positive"
        assert viscosity > 0, "Viscosity must be positive"
        assert heatCapacity > 0, "Heat capacity must be positive"
        assert conductivity > 0, "Conductivity must be positive"
        self.name = name
        self.backEnd = "Constant"
        self.density = density
        self.viscosity = viscosity
        self.heatCapacity = heatCapacity
        self.conductivity = conductivity
        self.temperatureReference = temperatureReference

    def _key(self):
        return (self.name, self.density, self.viscosity, self.heatCapacity, self.conductivity,
                self.temperatureReference)

    def __eq__(self, other):
        if not isinstance(other, ConstantPropertyFluid):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"ConstantPropertyFluid({self.name!r}, density={self.density}, " \
            f"viscosity={self.viscosity}, heatCapacity={self.heatCapacity}, " \
            f"conductivity={self.conductivity})"

    def calculateTemperature(self, properties: ThermoProps, variable1, variable2):
        match properties:
            case ThermoProps.HP:
                return self.temperatureReference + variable1/self.heatCapacity
            case _:
                raise NotImplementedError('This calculation has not yet been implemented')

    def calculateEnthalpy(self, properties: ThermoProps, variable1, variable2):
        match properties:
            case ThermoProps.PT:
                return self.heatCapacity*(variable2 - self.temperatureReference)
            case _:
                raise NotImplementedError('This calculation has not yet been implemented')

    def calculateDensity(self, properties: ThermoProps, variable1, variable2):
        return self.density

    def calculateHeatCapacity(self, properties: ThermoProps, variable1, variable2):
        return self.heatCapacity

    def calculateViscosity(self, properties: ThermoProps, variable1, variable2):
        return self.viscosity

    def calculateConductivity(self, properties: ThermoProps, variable1, variable2):
        return self.conductivity
