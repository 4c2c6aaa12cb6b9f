"""Atlas Intercept — compare every propulsion/payload combination offline.

No service needed: uses the local estimate directly.
"""

from atlasintercept import MissionParameters, fallback_outcome, trajectory_color

print(f"{'propulsion':<12}{'payload':<8}{'ΔV km/s':>9}{'years':>7}{'success':>9}  status   colour")
for propulsion in ("chemical", "ion", "solar-sail"):
    for payload in ("small", "medium", "large"):
        params = MissionParameters.from_inputs("2025-12-01T00:00", propulsion, payload)
        outcome = fallback_outcome(params)
        print(
            f"{propulsion:<12}{payload:<8}{outcome.delta_v_km_s:>9.2f}{outcome.transit_years:>7.2f}"
            f"{outcome.success_probability:>9.0%}  {outcome.status.value:<8} {trajectory_color(propulsion)}"
        )
