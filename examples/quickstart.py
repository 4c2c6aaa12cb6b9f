"""Atlas Intercept Quickstart — plan one mission and print its outcome."""

import asyncio

from atlasintercept import (
    MissionAPIClient,
    MissionParameters,
    OutcomeEstimator,
    SimulationOrchestrator,
    curve,
    positions,
)

params = MissionParameters.from_inputs("2025-10-30T10:00", "ion", "medium")

# Scene positions and the flight path the renderer would draw
earth, atlas = positions(params.launch_epoch)
path = curve(earth, atlas, params.propulsion)
print(f"Earth:     {earth.round(3)}")
print(f"3I/ATLAS:  {atlas.round(3)}")
print(f"Path:      {len(path)} points")

# Uses $ATLAS_API_URL, or falls back to an offline estimate
orchestrator = SimulationOrchestrator(OutcomeEstimator(MissionAPIClient()))
asyncio.run(orchestrator.simulate(params))

outcome = orchestrator.outcome
if orchestrator.advisory:
    print(orchestrator.advisory)
print(f"Transit:   {outcome.transit_years:.1f} years")
print(f"ΔV:        {outcome.delta_v_km_s:.1f} km/s")
print(f"Success:   {outcome.success_probability:.0%}")
print(f"Fuel cost: {outcome.propellant_cost:.1f}")
print(f"Status:    {outcome.status.value}")
for line in outcome.log:
    print(f"  - {line}")
