'''This module is used to convert values between different units,
   as needed when reading heat exchanger input files'''
from enum import Enum

class TemperatureConversions():
    """
    Class for all temperature unit conversions
    """

    class Unit(Enum):
        """
        Temperature units enum. minVal is absolute zero in the unit.
        """
        K = ("Kelvin", 0)
        C = ("Celsius", -273.15)
        F = ("Fahrenheit", -459.67)

        def __new__(cls, value, minVal):
            obj = object.__new__(cls)
            obj._value_ = value
            obj.minVal = minVal
            return obj

    def __init__(self):
        self.multiplicationFactorF = 9.0/5.0

    def _checkForUnrealTemp(self, unit: Unit, temperature):
        """
        Checks if given temperature is possible. If not, raises ValueError

        Raises
        ------
        ValueError
            Temperature is below absolute zero.

        """
        if temperature < unit.minVal:
            raise ValueError(f"Temperature in {unit.value} cannot be lower than {unit.minVal}")

    def _toKelvin(self, unit: Unit, temperature):
        if unit == self.Unit.F:
            return (temperature - unit.minVal)/self.multiplicationFactorF
        return temperature - unit.minVal

    def _fromKelvin(self, unit: Unit, temperature):
        if unit == self.Unit.F:
            return temperature*self.multiplicationFactorF + unit.minVal
        return temperature + unit.minVal

    def convertTemperature(self, unitFrom: Unit, unitTo: Unit, temperature):
        """
        Convert temperature among K, C and F by way of Kelvin, the unit streams carry.

        Raises
        ------
        ValueError
            temperature is below absolute zero in unitFrom.

        """
        self._checkForUnrealTemp(unitFrom, temperature)
        if unitFrom == unitTo:
            return temperature
        return self._fromKelvin(unitTo, self._toKelvin(unitFrom, temperature))

class _FactorUnit(Enum):
    """
    Unit of a quantity whose conversions are a factor only. factor is the value of one of
    the unit in the SI unit of the quantity.
    """
    def __new__(cls, units, factor):
        obj = object.__new__(cls)
        obj._value_ = units
        obj.factor = factor
        return obj

class _FactorConversions():

    def _convert(self, unitFrom: _FactorUnit, unitTo: _FactorUnit, value):
        return value*unitFrom.factor/unitTo.factor

class MassFlowConversions(_FactorConversions):
    """
    class for all mass flow unit conversions
    """

    class Unit(_FactorUnit):
        KGS = ("kilograms per second", 1.0)
        KGH = ("kilograms per hour", 1/3600)
        LBH = ("pounds per hour", 0.45359237/3600)
        LBM = ("pounds per minute", 0.45359237/60)

    def convertMassFlow(self, unitFrom: Unit, unitTo: Unit, massFlow):
        """
        Convert mass flow among kilograms per second (KGS), kilograms per hour (KGH),
        pounds per hour (LBH), and pounds per minute (LBM). Stream mass flows are carried
        in KGS internally.
        """
        return self._convert(unitFrom, unitTo, massFlow)

class PressureConversions(_FactorConversions):
    """
    class for all pressure unit conversions
    """

    class Unit(_FactorUnit):
        PA = ("Pascal", 1.0)
        KPA = ("kilopascal", 1e3)
        MPA = ("megapascal", 1e6)
        BAR = ("bar", 1e5)
        PSI = ("psi", 6894.757293)

    def convertPressure(self, unitFrom: Unit, unitTo: Unit, pressure):
        """
        Convert pressure among PA, KPA, MPA, BAR and PSI. Output files report BAR.
        """
        return self._convert(unitFrom, unitTo, pressure)

class GeometricConversions(_FactorConversions):
    """
    Length conversions for pipe dimensions, lengths and baffle spacings
    """

    class Unit(_FactorUnit):
        M = ("meters", 1.0)
        MM = ("millimeters", 1e-3)
        IN = ("inches", 0.0254)
        FT = ("feet", 0.3048)

    def convertLength(self, unitFrom: Unit, unitTo: Unit, length):
        return self._convert(unitFrom, unitTo, length)

class PowerConversions(_FactorConversions):
    """
    Heat duty conversions
    """

    class Unit(_FactorUnit):
        W = ("Watts", 1.0)
        KW = ("kilowatts", 1e3)
        BTUH = ("Btu/h", 0.2930710702)

    def convertPower(self, unitFrom: Unit, unitTo: Unit, power):
        """
        Convert heat duty among Watts (W), kilowatts (KW), and Btu/h (BTUH)

        Parameters
        ----------
        unitFrom : Unit
            unit of power.
        unitTo : Unit
            unit to report power in.
        power : float
            heat duty in unitFrom.

        Returns
        -------
        float
            heat duty in unitTo.

        """
        return self._convert(unitFrom, unitTo, power)
