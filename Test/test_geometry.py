# -*- coding: utf-8 -*-
"""
Created on Tue Jun 11 10:02:45 2024

@author: SMCANANA
"""
import numpy as np
import pytest
from STHX.models.Geometry import Pipe, WallMaterial, PIPE_SCHEDULES
from STHX.models.HeatExchangers import HeatExchanger
from STHX.calculations.Effectiveness import HEXArrangement

def pytest_generate_tests(metafunc):
    if metafunc.function.__name__ in metafunc.cls.params.keys():
        funcarglist = metafunc.cls.params[metafunc.function.__name__]
        argnames = sorted(funcarglist[0])
        metafunc.parametrize(
            argnames, [[funcargs[name] for name in argnames] for funcargs in funcarglist]
        )

@pytest.fixture
def tube():
    return Pipe.fromSchedule("1", "40", WallMaterial.STAINLESS_316, length=3.0)

@pytest.fixture
def shell():
    return Pipe.fromSchedule("10", "40", WallMaterial.STAINLESS_316, length=3.0)

@pytest.fixture
def heatExchanger(shell, tube):
    return HeatExchanger(shell=shell, tube=tube, numTubes=20, baffleSpacing=0.3, baffleCut=0.25,
                         arrangement=HEXArrangement.SHELL_ONE_PASS)

class TestWallMaterial:
    params = {"test_calculateConductivity": [dict(material=WallMaterial.STAINLESS_316, temperature=300, expected=13.961),
                                             dict(material=WallMaterial.STAINLESS_316, temperature=900, expected=23.387),
                                             dict(material=WallMaterial.COPPER, temperature=300, expected=401.0),
                                             dict(material=WallMaterial.CARBON_STEEL, temperature=273.15, expected=54.0)]}

    def test_calculateConductivity(self, material, temperature, expected):
        assert(round(material.calculateConductivity(temperature), 3) == expected)

    def test_lookupByValue(self):
        assert(WallMaterial("Stainless Steel") is WallMaterial.STAINLESS_316)

class TestPipe:
    params = {"test_fromSchedule": [dict(nominalSize="1", schedule="40", innerDiam=0.0266446, outerDiam=0.0334010),
                                    dict(nominalSize=1, schedule=40, innerDiam=0.0266446, outerDiam=0.0334010),
                                    dict(nominalSize=1.25, schedule="40", innerDiam=0.0350520, outerDiam=0.0421640),
                                    dict(nominalSize="10", schedule="40", innerDiam=0.2545080, outerDiam=0.2730500),
                                    dict(nominalSize="2", schedule="80", innerDiam=0.0492506, outerDiam=0.0603250)],
              "test_fromSchedule_unknownSize": [dict(nominalSize="5", schedule="40"),
                                                dict(nominalSize="1", schedule="160")],
              "test_invalidPipe": [dict(length=0.0, innerDiam=0.02, thickness=0.002),
                                   dict(length=1.0, innerDiam=-0.02, thickness=0.002),
                                   dict(length=1.0, innerDiam=0.02, thickness=-0.002)]}

    def test_fromSchedule(self, nominalSize, schedule, innerDiam, outerDiam):
        pipe = Pipe.fromSchedule(nominalSize, schedule, WallMaterial.STAINLESS_316, length=3.0)
        assert(round(pipe.innerDiam, 7) == innerDiam)
        assert(round(pipe.outerDiam, 7) == outerDiam)
        assert(pipe.thickness == pytest.approx((outerDiam - innerDiam)/2))

    def test_fromSchedule_unknownSize(self, nominalSize, schedule):
        with pytest.raises(KeyError):
            Pipe.fromSchedule(nominalSize, schedule, WallMaterial.STAINLESS_316, length=3.0)

    def test_invalidPipe(self, length, innerDiam, thickness):
        with pytest.raises(AssertionError):
            Pipe(length, innerDiam, thickness, WallMaterial.COPPER.calculateConductivity)

    def test_defaults(self, tube):
        assert(tube.areaFlow == pytest.approx(np.pi*tube.innerDiam**2/4))
        assert(tube.outerDiam == pytest.approx(tube.innerDiam + 2*tube.thickness))
        assert(tube.areaTotal == pytest.approx(np.pi*tube.outerDiam**2/4))
        assert(tube.perimeterWetted == pytest.approx(np.pi*tube.innerDiam))
        assert(tube.innerRadius == tube.innerDiam/2)
        assert(tube.roughness == 1.5e-6)
        assert(tube.elevationChange == 0.0)
        assert(tube.thermalConductivity(300) == WallMaterial.STAINLESS_316.calculateConductivity(300))

    def test_withFlowPassage(self, tube):
        passage = tube.withFlowPassage(0.01, 1e-4)
        assert(passage.innerDiam == 0.01)
        assert(passage.areaFlow == 1e-4)
        assert(passage.outerDiam == tube.outerDiam)
        assert(passage.areaTotal == tube.areaTotal)
        assert(passage.length == tube.length)
        assert(passage.thickness == tube.thickness)
        assert(tube.innerDiam != 0.01)

    def test_immutable(self, tube):
        with pytest.raises(AttributeError):
            tube.length = 5.0

    def test_schedulesTabulated(self):
        for outerDiam, thicknesses in PIPE_SCHEDULES.values():
            assert(set(thicknesses) == {"40", "80"})
            assert(all(0 < 2*thickness < outerDiam for thickness in thicknesses.values()))

class TestHeatExchanger:
    params = {"test_invalidHeatExchanger": [dict(numTubes=0, baffleCut=0.25),
                                            dict(numTubes=60, baffleCut=0.25),
                                            dict(numTubes=20, baffleCut=1.0),
                                            dict(numTubes=20, baffleCut=-0.1)]}

    def test_shellFlow(self, heatExchanger, shell, tube):
        areaFlow = shell.areaFlow - 20*tube.areaTotal
        perimeterWetted = np.pi*shell.innerDiam + 20*np.pi*tube.outerDiam
        assert(heatExchanger.shellFlow.areaFlow == pytest.approx(areaFlow))
        assert(heatExchanger.shellFlow.innerDiam == pytest.approx(4*areaFlow/perimeterWetted))
        assert(round(heatExchanger.shellFlow.innerDiam, 5) == 0.04603)
        assert(round(heatExchanger.shellFlow.areaFlow, 5) == 0.03335)

    def test_shellFlow_keepsShell(self, heatExchanger, shell):
        assert(heatExchanger.shell == shell)
        assert(heatExchanger.shellFlow.outerDiam == shell.outerDiam)
        assert(heatExchanger.shellFlow.length == shell.length)
        assert(heatExchanger.shellFlow.thermalConductivity(600) == shell.thermalConductivity(600))

    def test_immutable(self, heatExchanger):
        with pytest.raises(AttributeError):
            heatExchanger.numTubes = 10

    def test_invalidHeatExchanger(self, shell, tube, numTubes, baffleCut):
        with pytest.raises(AssertionError):
            HeatExchanger(shell=shell, tube=tube, numTubes=numTubes, baffleSpacing=0.3,
                          baffleCut=baffleCut, arrangement=HEXArrangement.COUNTER)

    def test_calculateAreaWetted(self, heatExchanger, tube):
        assert(heatExchanger.calculateAreaWetted('inner') == pytest.approx(np.pi*tube.innerDiam*3.0*20))
        assert(heatExchanger.calculateAreaWetted('outer') == pytest.approx(np.pi*tube.outerDiam*3.0*20))
        assert(heatExchanger.calculateAreaWetted('outer') > heatExchanger.calculateAreaWetted('inner'))

    def test_calculateThermalResistanceWall(self, heatExchanger, tube):
        expected = np.log(tube.outerDiam/tube.innerDiam)/(2*np.pi*3.0*13.961*20)
        assert(heatExchanger.calculateThermalResistanceWall(300) == pytest.approx(expected))

    def test_outputList(self, heatExchanger):
        outputs = {description: (units, value) for description, units, value in heatExchanger.outputList()}
        assert(outputs['Number of tubes'] == ('-', 20))
        assert(outputs['Arrangement'] == ('-', "Shell and tube, one shell pass"))
        assert(outputs['Shell side hydraulic diameter'][1] == heatExchanger.shellFlow.innerDiam)
