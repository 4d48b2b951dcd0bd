# -*- coding: utf-8 -*-
"""
Thermal-hydraulic performance of a shell-and-tube heat exchanger.

estimatePerformance gives outlet states in one pass of the effectiveness-NTU method with
properties at the inlet states. solvePerformance refines those outlet states until the
enthalpy balances and pressure drops of both streams agree with properties at the averaged
inlet/outlet states.

Per-tube flow is the total tube side flow divided by the number of tubes.

@author: smcanana
"""
from dataclasses import dataclass
from typing import NamedTuple
import logging
import numpy as np
from scipy.optimize import root
from STHX.models.Streams import FlowStream
from STHX.calculations.Correlations import getCorrelation, DEFAULT_CORRELATIONS
from STHX.calculations.Effectiveness import calculateEffectiveness

logger = logging.getLogger("Performance")

class StreamRoles(NamedTuple):
    hot: object
    cold: object
    shellIsHot: bool

def classifyStreams(shellStream, tubeStream):
    """
    Decides which of the two inlet streams is hot. On equal temperatures the tube stream is
    taken as hot.
    """
    if shellStream.temperature > tubeStream.temperature:
        return StreamRoles(shellStream, tubeStream, True)
    return StreamRoles(tubeStream, shellStream, False)

class HeatTransferResult(NamedTuple):
    capacityMin: float
    capacityRatio: float
    heatTransferCoeffShell: float
    heatTransferCoeffTube: float
    resistanceWall: float
    conductance: float
    ntu: float
    effectiveness: float
    heatTransferMax: float
    heatTransferred: float

def tubeFlowStream(hx, tubeStream):
    """Flow through a single tube of the bundle"""
    return FlowStream(hx.tube, tubeStream.withMassFlow(tubeStream.massFlow/hx.numTubes))

def resolveCorrelations(hx, shellInlet, tubeInlet, shellCorrelation=None, tubeCorrelation=None,
                        registry=DEFAULT_CORRELATIONS):
    """
    Returns the shell and tube correlations, looking up in registry the ones not given
    """
    if shellCorrelation is None:
        shellCorrelation = getCorrelation(FlowStream(hx.shellFlow, shellInlet), "shell", registry)
    if tubeCorrelation is None:
        tubeCorrelation = getCorrelation(tubeFlowStream(hx, tubeInlet), "tube", registry)
    return shellCorrelation, tubeCorrelation

def calculateHeatTransfer(hx, roles, shellFlow, tubeFlow, shellCorrelation, tubeCorrelation,
                          capacityHot, capacityCold, tempWall, conductivityShell=None,
                          conductivityTube=None):
    r"""
    Calculates the heat transferred between the two streams by the effectiveness-NTU method

        1/UA = 1/(h_shell*A_outer) + 1/(h_tube*A_inner) + R_wall

    Parameters
    ----------
    hx : HeatExchanger
        heat exchanger.
    roles : StreamRoles
        hot and cold inlet streams.
    shellFlow : FlowStream
        shell side flow the shell correlation is evaluated with.
    tubeFlow : FlowStream
        single tube flow the tube correlation is evaluated with.
    shellCorrelation, tubeCorrelation : function
        Nusselt number correlations, correlation(flowStream, tempWall).
    capacityHot, capacityCold : float
        heat capacity rates in W/K.
    tempWall : float
        wall temperature estimate passed to the correlations, in K.
    conductivityShell, conductivityTube : float, optional
        fluid conductivities converting Nusselt numbers to film coefficients. Default to the
        conductivities of the flow streams.

    Returns
    -------
    HeatTransferResult

    """
    capacityMin = min(capacityHot, capacityCold)
    capacityRatio = capacityMin/max(capacityHot, capacityCold)
    if conductivityShell is None:
        conductivityShell = shellFlow.stream.conductivity
    if conductivityTube is None:
        conductivityTube = tubeFlow.stream.conductivity
    heatTransferCoeffShell = shellCorrelation(shellFlow, tempWall)*conductivityShell/hx.shellFlow.innerDiam
    heatTransferCoeffTube = tubeCorrelation(tubeFlow, tempWall)*conductivityTube/hx.tube.innerDiam
    # wall conductivity at the mean of the inlet temperatures
    resistanceWall = hx.calculateThermalResistanceWall((roles.hot.temperature + roles.cold.temperature)/2)
    conductance = 1/(1/(heatTransferCoeffShell*hx.calculateAreaWetted('outer'))
                     + 1/(heatTransferCoeffTube*hx.calculateAreaWetted('inner')) + resistanceWall)
    ntu = conductance/capacityMin
    effectiveness = calculateEffectiveness(ntu, capacityRatio, hx.arrangement, hx.numShellPasses)
    heatTransferMax = capacityMin*(roles.hot.temperature - roles.cold.temperature)
    return HeatTransferResult(capacityMin, capacityRatio, heatTransferCoeffShell,
                              heatTransferCoeffTube, resistanceWall, conductance, ntu,
                              effectiveness, heatTransferMax, effectiveness*heatTransferMax)

def evaluatePerformance(hx, shellInlet, tubeInlet, shellCorrelation=None, tubeCorrelation=None,
                        registry=DEFAULT_CORRELATIONS):
    """
    Single pass of the effectiveness-NTU method with all properties at the inlet states

    Returns
    -------
    hotOutlet : Stream
        outlet state of the hot stream.
    coldOutlet : Stream
        outlet state of the cold stream.
    result : HeatTransferResult
        intermediate values of the calculation.

    """
    shellCorrelation, tubeCorrelation = resolveCorrelations(hx, shellInlet, tubeInlet, shellCorrelation,
                                                            tubeCorrelation, registry)
    roles = classifyStreams(shellInlet, tubeInlet)
    hot, cold = roles.hot, roles.cold
    shellFlow = FlowStream(hx.shellFlow, shellInlet)
    tubeFlow = tubeFlowStream(hx, tubeInlet)
    capacityHot, capacityCold = hot.capacityRate, cold.capacityRate
    result = calculateHeatTransfer(hx, roles, shellFlow, tubeFlow, shellCorrelation, tubeCorrelation,
                                   capacityHot, capacityCold, (hot.temperature + cold.temperature)/2)
    hotFlow, coldFlow = (shellFlow, tubeFlow) if roles.shellIsHot else (tubeFlow, shellFlow)
    hotOutlet = hot.withState(hot.pressure - hotFlow.pressureDrop,
                              hot.temperature - result.heatTransferred/capacityHot)
    coldOutlet = cold.withState(cold.pressure - coldFlow.pressureDrop,
                                cold.temperature + result.heatTransferred/capacityCold)
    return hotOutlet, coldOutlet, result

def estimatePerformance(hx, shellInlet, tubeInlet, shellCorrelation=None, tubeCorrelation=None,
                        registry=DEFAULT_CORRELATIONS):
    """
    Estimates the outlet states of both streams with properties at the inlet states

    Parameters
    ----------
    hx : HeatExchanger
        heat exchanger.
    shellInlet : Stream
        stream entering the shell.
    tubeInlet : Stream
        stream entering the tube bundle, total flow of all tubes.
    shellCorrelation, tubeCorrelation : function, optional
        Nusselt number correlations. Looked up in registry by substance name when not given.
    registry : Mapping, optional
        correlation registry. The default is DEFAULT_CORRELATIONS.

    Returns
    -------
    hotOutlet : Stream
        outlet state of the hot stream.
    coldOutlet : Stream
        outlet state of the cold stream.

    """
    hotOutlet, coldOutlet, result = evaluatePerformance(hx, shellInlet, tubeInlet, shellCorrelation,
                                                        tubeCorrelation, registry)
    logger.info("Heat transferred: %.6g W", result.heatTransferred,
                extra={"methodname": "estimatePerformance"})
    return hotOutlet, coldOutlet

def calculateResiduals(hx, shellInlet, tubeInlet, shellCorrelation, tubeCorrelation, guess):
    r"""
    Residuals of the outlet state guess [tempOutHot, tempOutCold, pressureOutHot,
    pressureOutCold]:

        q - |H_hot,in - H_hot,out|
        q - |H_cold,in - H_cold,out|
        (p_hot,in - p_hot,out) - dp_hot
        (p_cold,in - p_cold,out) - dp_cold

    where H is the enthalpy flow in W, q the heat transferred with properties at the
    averaged inlet/outlet states and dp the pressure drop of the flow at the averaged state.

    Returns
    -------
    numpy array of 4 floats

    """
    tempOutHot, tempOutCold, pressureOutHot, pressureOutCold = guess
    roles = classifyStreams(shellInlet, tubeInlet)
    hot, cold = roles.hot, roles.cold
    hotAverage = hot.withState((hot.pressure + pressureOutHot)/2, (hot.temperature + tempOutHot)/2)
    coldAverage = cold.withState((cold.pressure + pressureOutCold)/2, (cold.temperature + tempOutCold)/2)
    capacityHot = hot.massFlow*hotAverage.heatCapacity
    capacityCold = cold.massFlow*coldAverage.heatCapacity
    shellAverage, tubeAverage = (hotAverage, coldAverage) if roles.shellIsHot else (coldAverage, hotAverage)
    shellFlow = FlowStream(hx.shellFlow, shellAverage)
    tubeFlow = tubeFlowStream(hx, tubeAverage)
    # film coefficients use the inlet conductivities
    result = calculateHeatTransfer(hx, roles, shellFlow, tubeFlow, shellCorrelation, tubeCorrelation,
                                   capacityHot, capacityCold,
                                   (hotAverage.temperature + coldAverage.temperature)/2,
                                   conductivityShell=shellInlet.conductivity,
                                   conductivityTube=tubeInlet.conductivity)
    hotFlow, coldFlow = (shellFlow, tubeFlow) if roles.shellIsHot else (tubeFlow, shellFlow)
    hotOutlet = hot.withState(pressureOutHot, tempOutHot)
    coldOutlet = cold.withState(pressureOutCold, tempOutCold)
    heatTransferred = result.heatTransferred
    return np.array([heatTransferred - abs(hot.enthalpyFlow - hotOutlet.enthalpyFlow),
                     heatTransferred - abs(cold.enthalpyFlow - coldOutlet.enthalpyFlow),
                     (hot.pressure - pressureOutHot) - hotFlow.pressureDrop,
                     (cold.pressure - pressureOutCold) - coldFlow.pressureDrop])

@dataclass(frozen=True)
class SolveResult():
    """
    Outcome of solvePerformance. Temperatures in K, pressures in Pa, residuals in W and Pa.
    converged is True only when the solver reports success and the largest residual is
    within the tolerance.
    """
    converged: bool
    tempOutHot: float
    tempOutCold: float
    pressureOutHot: float
    pressureOutCold: float
    residuals: tuple
    residualNorm: float
    numEvaluations: int
    message: str
    shellIsHot: bool

    @property
    def solution(self):
        return np.array([self.tempOutHot, self.tempOutCold, self.pressureOutHot, self.pressureOutCold])

    def outletStreams(self, shellInlet, tubeInlet):
        """
        Returns the hot and cold outlet streams for the inlets the result was solved for
        """
        roles = classifyStreams(shellInlet, tubeInlet)
        return (roles.hot.withState(self.pressureOutHot, self.tempOutHot),
                roles.cold.withState(self.pressureOutCold, self.tempOutCold))

def _solverOptions(method, maxIterations):
    if method == "hybr":
        return {"maxfev": maxIterations}
    return {"maxiter": maxIterations}

def solvePerformance(hx, shellInlet, tubeInlet, shellCorrelation=None, tubeCorrelation=None,
                     tolerance=2.0, maxIterations=200, method="hybr", solverTolerance=None,
                     registry=DEFAULT_CORRELATIONS):
    """
    Solves for the outlet temperatures and pressures of both streams, starting from
    estimatePerformance

    Parameters
    ----------
    hx : HeatExchanger
        heat exchanger.
    shellInlet : Stream
        stream entering the shell.
    tubeInlet : Stream
        stream entering the tube bundle, total flow of all tubes.
    shellCorrelation, tubeCorrelation : function, optional
        Nusselt number correlations. Looked up in registry by substance name when not given.
    tolerance : float, optional
        largest absolute residual, in W for the energy balances and Pa for the pressure
        balances, accepted as converged. It is checked on the result and is not a stopping
        criterion of the root finder. The default is 2.0.
    maxIterations : int, optional
        limit on residual evaluations (hybr) or iterations (other methods). The default is 200.
    method : str, optional
        scipy.optimize.root method. The default is "hybr".
    solverTolerance : float, optional
        termination tolerance handed to scipy.optimize.root as tol (relative step size for
        hybr). The default is None, the scipy default.
    registry : Mapping, optional
        correlation registry. The default is DEFAULT_CORRELATIONS.

    Returns
    -------
    SolveResult
        result of the solve. Property evaluation failures during the solve are reported as
        a result that has not converged, holding the last guess tried.

    """
    shellCorrelation, tubeCorrelation = resolveCorrelations(hx, shellInlet, tubeInlet, shellCorrelation,
                                                            tubeCorrelation, registry)
    shellIsHot = classifyStreams(shellInlet, tubeInlet).shellIsHot
    hotGuess, coldGuess = estimatePerformance(hx, shellInlet, tubeInlet, shellCorrelation, tubeCorrelation)
    initialGuess = np.array([hotGuess.temperature, coldGuess.temperature,
                             hotGuess.pressure, coldGuess.pressure])
    evaluations = {"count": 0, "guess": initialGuess}

    def residualFunction(guess):
        evaluations["count"] += 1
        evaluations["guess"] = np.array(guess)
        return calculateResiduals(hx, shellInlet, tubeInlet, shellCorrelation, tubeCorrelation, guess)

    try:
        solution = root(residualFunction, initialGuess, method=method, tol=solverTolerance,
                        options=_solverOptions(method, maxIterations))
    except ValueError as err:
        logger.error("Property evaluation failed during solve: %s", err,
                     extra={"methodname": "solvePerformance"})
        lastGuess = evaluations["guess"]
        return SolveResult(False, *(float(value) for value in lastGuess),
                           residuals=(np.nan,)*4, residualNorm=np.inf,
                           numEvaluations=evaluations["count"], message=str(err),
                           shellIsHot=shellIsHot)
    residuals = np.asarray(solution.fun, dtype=float)
    residualNorm = float(np.max(np.abs(residuals)))
    converged = bool(solution.success) and residualNorm <= tolerance
    if converged:
        logger.info("Solved in %d evaluations, largest residual %.3g", evaluations["count"],
                    residualNorm, extra={"methodname": "solvePerformance"})
    else:
        logger.warning("Solve did not converge, largest residual %.3g: %s", residualNorm,
                       solution.message, extra={"methodname": "solvePerformance"})
    return SolveResult(converged, *(float(value) for value in solution.x),
                       residuals=tuple(float(value) for value in residuals),
                       residualNorm=residualNorm, numEvaluations=evaluations["count"],
                       message=str(solution.message), shellIsHot=shellIsHot)
