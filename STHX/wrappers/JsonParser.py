# -*- coding: utf-8 -*-
"""
Created on Fri May  3 10:10:16 2024

@author: SMCANANA
"""
from STHX.models.Fluid import Fluid, ConstantPropertyFluid
from STHX.models.Geometry import Pipe, WallMaterial
from STHX.models.Streams import Stream
from STHX.models.HeatExchangers import HeatExchanger
from STHX.wrappers.CoolPropWrapper import BackEnd
from STHX.calculations.Conversions import TemperatureConversions, MassFlowConversions, \
    PressureConversions, GeometricConversions
from STHX.calculations.Correlations import NusseltCorrelation, correlationFunction
from STHX.calculations.Effectiveness import HEXArrangement

def parseFluid(jsonDict):
    """
    Builds the fluid of a stream block. A block with constantProperties gives a
    ConstantPropertyFluid, otherwise a CoolProp Fluid. A fluidName of the form 'MEG::50%'
    gives an incompressible solution with that mass fraction.
    """
    fluidName = jsonDict["fluidName"]
    if "constantProperties" in jsonDict:
        return ConstantPropertyFluid(fluidName, **jsonDict["constantProperties"])
    if '::' in fluidName: #assuming form of 'MEG::50%'
        name, fraction = fluidName.split('::')
        return Fluid(name, BackEnd.INCOMP, massFraction=float(fraction.replace('%', ''))/100)
    return Fluid(fluidName, BackEnd(jsonDict.get("backEnd", "HEOS")))

def _values(jsonDict):
    if "values" in jsonDict:
        return jsonDict["values"]
    return [jsonDict["value"]]

def _single(jsonDict, values):
    return values if "values" in jsonDict else values[0]

def parsePressure(jsonDict):
    """Pressure(s) in Pa from {"unit": ..., "value"/"values": ...}"""
    pc = PressureConversions()
    unit = pc.Unit[jsonDict["unit"]]
    return _single(jsonDict, [pc.convertPressure(unit, pc.Unit.PA, pressure) for pressure in _values(jsonDict)])

def parseTemperature(jsonDict):
    """Temperature(s) in K from {"unit": ..., "value"/"values": ...}"""
    tc = TemperatureConversions()
    unit = tc.Unit[jsonDict["unit"]]
    return _single(jsonDict, [tc.convertTemperature(unit, tc.Unit.K, temperature)
                              for temperature in _values(jsonDict)])

def parseMassFlow(jsonDict):
    """Mass flow(s) in kg/s from {"unit": ..., "value"/"values": ...}"""
    mfc = MassFlowConversions()
    unit = mfc.Unit[jsonDict["unit"]]
    return _single(jsonDict, [mfc.convertMassFlow(unit, mfc.Unit.KGS, massFlow) for massFlow in _values(jsonDict)])

def parseLength(jsonDict):
    """Length(s) in m from {"unit": ..., "value"/"values": ...}"""
    gc = GeometricConversions()
    unit = gc.Unit[jsonDict["unit"]]
    return _single(jsonDict, [gc.convertLength(unit, gc.Unit.M, length) for length in _values(jsonDict)])

def parseStream(jsonDict):
    return Stream(parseFluid(jsonDict["fluid"]), parseMassFlow(jsonDict["massFlowIn"]),
                  parsePressure(jsonDict["pressureIn"]), parseTemperature(jsonDict["temperatureIn"]))

def parsePipe(jsonDict):
    """
    Builds a pipe either from its nominal size and schedule or from explicit innerDiam and
    thickness. The wall material is a WallMaterial value, e.g. "Stainless Steel".

    Raises
    ------
    KeyError
        Unknown unit, nominal size or schedule.
    ValueError
        Unknown wall material.

    """
    material = WallMaterial(jsonDict["material"])
    length = parseLength(jsonDict["length"])
    roughness = parseLength(jsonDict["roughness"]) if "roughness" in jsonDict else 1.5e-6
    elevationChange = parseLength(jsonDict["elevationChange"]) if "elevationChange" in jsonDict else 0.0
    if "nominalSize" in jsonDict:
        return Pipe.fromSchedule(jsonDict["nominalSize"], jsonDict["schedule"], material, length,
                                 roughness=roughness, elevationChange=elevationChange)
    return Pipe(length=length, innerDiam=parseLength(jsonDict["innerDiam"]),
                thickness=parseLength(jsonDict["thickness"]),
                thermalConductivity=material.calculateConductivity, roughness=roughness,
                elevationChange=elevationChange)

def parseHeatExchanger(jsonDict):
    """HEX block; arrangement is the name of a HEXArrangement member, e.g. "SHELL_ONE_PASS" """
    return HeatExchanger(shell=parsePipe(jsonDict["shell"]), tube=parsePipe(jsonDict["tube"]),
                         numTubes=jsonDict["numTubes"],
                         baffleSpacing=parseLength(jsonDict["baffleSpacing"]),
                         baffleCut=jsonDict["baffleCut"],
                         arrangement=HEXArrangement[jsonDict["arrangement"]],
                         numShellPasses=jsonDict.get("numShellPasses", 2))

def parseCorrelations(jsonDict):
    """
    Correlations block {"shell": name, "tube": name} with names of NusseltCorrelation
    members. Sides not given are left to the correlation registry.

    Returns
    -------
    dict
        shellCorrelation and tubeCorrelation, functions or None.

    """
    jsonDict = jsonDict or {}
    correlations = {}
    for side in ["shell", "tube"]:
        name = jsonDict.get(side)
        correlations[f"{side}Correlation"] = None if name is None else \
            correlationFunction(NusseltCorrelation[name])
    return correlations

def parseSolverOptions(jsonDict):
    """Solver block; only the options given are returned so the solver defaults apply"""
    jsonDict = jsonDict or {}
    return {key: jsonDict[key] for key in ["tolerance", "maxIterations", "method", "solverTolerance"]
            if key in jsonDict}
