# -*- coding: utf-8 -*-
"""
Created on Fri Apr 26 14:44:47 2024

@author: SMCANANA
"""
from operator import itemgetter
from json import dumps, load
from pathlib import Path
import logging
from STHX.wrappers.JsonParser import parseStream, parseHeatExchanger, parseCorrelations, \
    parseSolverOptions, parseMassFlow
from STHX.calculations.Conversions import TemperatureConversions, PressureConversions, PowerConversions

logger = logging.getLogger("FileOperations")

def createCsvTable(data, testName, value, sorting, outputFolder, reverse=(False, False)):
    """
    Creates a 2D table in csv format using 2 sorting parameters and one value
    to put in the table.

    Parameters
    ----------
    data : dict
        data in json format.
    testName : str
        name of test in json data.
    value : str
        name of value in test to be put in table.
    sorting : tuple of str
        2 parameters to sort the list by. The first parameter is the y-axis, and the second is the
        x-axis.
    outputFolder : str or Path
        folder the file is written to.
    reverse : tuple of bool, optional
        2 parameters for whether the list should be sorted in reverse order. The first parameter is
        for the y-axis, and the second is for the x-axis. The default is (False, False).

    Returns
    -------
    Path
        path of the file written.

    """
    jsonDataSorted = data[testName]
    for key, reverse_sort in zip(reversed(sorting), reversed(reverse)):
        jsonDataSorted = sorted(jsonDataSorted, key=itemgetter(key), reverse=reverse_sort)
    secondParamList = sorted(set(point[sorting[1]] for point in jsonDataSorted), reverse=reverse[1])
    rows = {}
    for point in jsonDataSorted:
        rows.setdefault(point[sorting[0]], {})[point[sorting[1]]] = point[value]
    filepath = Path(outputFolder)/f"{testName}_{value}.csv"
    with open(filepath, "w") as file:
        file.write("sep=,")
        for firstParam, row in rows.items():
            file.write(f"\n{firstParam},{','.join(str(row.get(x, '')) for x in secondParamList)}")
        file.write(f"\n,{','.join(str(x) for x in secondParamList)}")
    return filepath

def createJsonFile(jsonData, testName, outputFolder):
    """
    Writes the results of a test to {outputFolder}/{testName}.json. Values whose key names a
    pressure are converted from Pa to bar, a temperature ("temp") from K to C and a heat
    transfer ("heatTransferred") from W to kW. jsonData is not modified.

    Returns
    -------
    Path
        path of the file written.

    """
    tc = TemperatureConversions()
    pc = PressureConversions()
    powc = PowerConversions()
    converted = []
    for singlePoint in jsonData[testName]:
        point = dict(singlePoint)
        for pointData, pointValue in singlePoint.items():
            if not isinstance(pointValue, (int, float)) or isinstance(pointValue, bool):
                continue
            if "pressure" in pointData:
                point[pointData] = pc.convertPressure(pc.Unit.PA, pc.Unit.BAR, pointValue)
            elif "temp" in pointData:
                point[pointData] = tc.convertTemperature(tc.Unit.K, tc.Unit.C, pointValue)
            elif "heatTransferred" in pointData:
                point[pointData] = powc.convertPower(powc.Unit.W, powc.Unit.KW, pointValue)
        converted.append(point)
    filepath = Path(outputFolder)/f"{testName}.json"
    logger.info("Writing %s", filepath, extra={"methodname": "createJsonFile"})
    with open(filepath, "w") as file:
        file.write(dumps({testName: converted}, indent=4))
    return filepath

def getValuesFromInputFile(filepath):
    """
    Reads the first case of a JSON input file

    Returns
    -------
    testName : str
        name of the case.
    params : dict
        shellInlet and tubeInlet (Stream), heatExchanger (HeatExchanger), correlations
        and solverOptions (dicts of keyword arguments for solvePerformance) and, when the
        case has a sweep block, tubeMassFlows (list of kg/s).

    """
    with open(filepath) as file:
        jsonData = load(file)
    jsonInput = jsonData["inputs"][0]
    params = {
        "shellInlet": parseStream(jsonInput["shell"]),
        "tubeInlet": parseStream(jsonInput["tube"]),
        "heatExchanger": parseHeatExchanger(jsonInput["HEX"]),
        "correlations": parseCorrelations(jsonInput.get("correlations")),
        "solverOptions": parseSolverOptions(jsonInput.get("solver")),
    }
    if "sweep" in jsonInput:
        tubeMassFlows = parseMassFlow(jsonInput["sweep"]["tubeMassFlows"])
        params["tubeMassFlows"] = tubeMassFlows if isinstance(tubeMassFlows, list) else [tubeMassFlows]
    return jsonInput["testName"], params
