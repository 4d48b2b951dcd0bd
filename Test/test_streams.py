# -*- coding: utf-8 -*-
"""
Created on Thu Jun 13 08:47:52 2024

@author: SMCANANA
"""
from dataclasses import replace
import numpy as np
import pytest
from STHX.models.Fluid import Fluid, ConstantPropertyFluid, ThermoProps
from STHX.models.Geometry import Pipe, WallMaterial
from STHX.models.Streams import Stream, FlowStream
from STHX.calculations.Correlations import FluidMechanics

def pytest_generate_tests(metafunc):
    if metafunc.function.__name__ in metafunc.cls.params.keys():
        funcarglist = metafunc.cls.params[metafunc.function.__name__]
        argnames = sorted(funcarglist[0])
        metafunc.parametrize(
            argnames, [[funcargs[name] for name in argnames] for funcargs in funcarglist]
        )

@pytest.fixture
def water():
    return ConstantPropertyFluid("Water", density=1000.0, viscosity=1e-3, heatCapacity=4180.0,
                                 conductivity=0.6)

@pytest.fixture
def stream(water):
    return Stream(water, 0.2, 1e5, 300.0)

@pytest.fixture
def tube():
    return Pipe.fromSchedule("1", "40", WallMaterial.STAINLESS_316, length=3.0)

class TestStream:
    params = {"test_invalidMassFlow": [dict(massFlow=0.0), dict(massFlow=-1.0)]}

    def test_properties(self, stream):
        assert(stream.substanceName == "Water")
        assert(stream.density == 1000.0)
        assert(stream.viscosity == 1e-3)
        assert(stream.heatCapacity == 4180.0)
        assert(stream.conductivity == 0.6)
        assert(stream.enthalpy == pytest.approx(4180.0*(300.0 - 298.15)))

    def test_flowQuantities(self, stream):
        assert(stream.capacityRate == pytest.approx(0.2*4180.0))
        assert(stream.enthalpyFlow == pytest.approx(0.2*stream.enthalpy))

    def test_invalidMassFlow(self, water, massFlow):
        with pytest.raises(AssertionError):
            Stream(water, massFlow, 1e5, 300.0)

    def test_withState(self, stream):
        newStream = stream.withState(2e5, 350.0)
        assert(newStream.pressure == 2e5)
        assert(newStream.temperature == 350.0)
        assert(newStream.massFlow == stream.massFlow)
        assert(newStream.fluid is stream.fluid)
        assert(stream.temperature == 300.0)

    def test_withMassFlow(self, stream):
        newStream = stream.withMassFlow(0.05)
        assert(newStream.massFlow == 0.05)
        assert(newStream.temperature == stream.temperature)
        assert(stream.massFlow == 0.2)

    def test_immutable(self, stream):
        with pytest.raises(AttributeError):
            stream.temperature = 310.0

    def test_propertiesEvaluatedOnce(self, mocker, water):
        spy = mocker.spy(water, "calculateDensity")
        stream = Stream(water, 0.2, 1e5, 300.0)
        assert(stream.density == stream.density)
        spy.assert_called_once_with(ThermoProps.PT, 1e5, 300.0)

    def test_coolPropStream(self):
        stream = Stream(Fluid("Water", "HEOS"), 1.0, 1e5, 300.0)
        assert(stream.density == pytest.approx(996.5, rel=1e-3))
        assert(stream.capacityRate == pytest.approx(4180.0, rel=2e-3))

class TestFlowStream:
    params = {"test_calculateChurchillFrictionFactor_laminar": [dict(massFlow=0.002), dict(massFlow=0.01)]}

    def test_velocity(self, tube, stream):
        flowStream = FlowStream(tube, stream)
        assert(flowStream.velocity == pytest.approx(0.2/(1000.0*np.pi*tube.innerDiam**2/4)))
        assert(round(flowStream.velocity, 4) == 0.3587)

    def test_dimensionlessNumbers(self, tube, stream):
        flowStream = FlowStream(tube, stream)
        assert(flowStream.reynoldsNum == pytest.approx(1000.0*flowStream.velocity*tube.innerDiam/1e-3))
        assert(round(flowStream.reynoldsNum) == 9557)
        assert(flowStream.prandtlNum == pytest.approx(4180.0*1e-3/0.6))
        assert(flowStream.pecletNum == pytest.approx(flowStream.reynoldsNum*flowStream.prandtlNum))

    def test_calculateChurchillFrictionFactor_laminar(self, tube, stream, massFlow):
        flowStream = FlowStream(tube, stream.withMassFlow(massFlow))
        assert(flowStream.reynoldsNum < 2000)
        assert(flowStream.frictionFactor == pytest.approx(64/flowStream.reynoldsNum, rel=1e-3))

    def test_frictionFactor_usesRoughness(self, tube, stream):
        smooth = FlowStream(replace(tube, roughness=0.0), stream)
        rough = FlowStream(replace(tube, roughness=1e-4), stream)
        assert(smooth.frictionFactor == FluidMechanics.calculateChurchillFrictionFactor(smooth.reynoldsNum, 0.0))
        assert(rough.frictionFactor > smooth.frictionFactor)

    def test_pressureDrop(self, tube, stream):
        flowStream = FlowStream(tube, stream)
        expected = flowStream.frictionFactor*3.0/tube.innerDiam*1000.0*flowStream.velocity**2/2
        assert(flowStream.pressureDrop == pytest.approx(expected))
        assert(flowStream.pressureDrop > 0)

    def test_pressureDrop_elevationChange(self, tube, stream):
        level = FlowStream(tube, stream)
        rising = FlowStream(replace(tube, elevationChange=2.0), stream)
        assert(rising.pressureDrop - level.pressureDrop == pytest.approx(1000.0*9.80665*2.0))
