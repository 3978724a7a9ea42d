#!/usr/bin/env python3
"""Demo script showing the selector workflow against the live API.

This script demonstrates:
1. Estimating annual emissions for a workload in every GB region
2. Ranking regions and reading the color scale
3. Selecting a region through the layout hook to load its generation mix

Run with: python examples/selector_session_demo.py

Note: Requires network access to api.carbonintensity.org.uk
"""

from __future__ import annotations

import asyncio

from greendc.controller import SelectorSession
from greendc.viz.color_scale import assign_colors


async def main() -> None:
    """Run the selector demo."""
    session = SelectorSession()

    print("=" * 60)
    print("Selector Session Demo")
    print("=" * 60)
    print()

    await session.calculate({"cores": 16, "memory_gb": 64})
    if session.error:
        print(f"Calculation failed: {session.error}")
        return

    colors = {a.region_name: a.color.hex() for a in assign_colors(session.results)}
    for result in session.ranked():
        print(
            f"  {result.region_name:<38} {result.display_co2_kg:>10.2f} kg "
            f"{colors[result.region_name]}"
        )
    print()

    heatmap = session.layout()
    best = session.ranked()[0].region_name
    print(f"Selecting {best} through the heatmap...")
    heatmap.select(best)
    await session.wait_for_selections()

    if session.error:
        print(f"Generation mix unavailable: {session.error}")
        return
    for entry in session.generation_mix or []:
        print(f"  {entry.fuel_type:<10} {entry.percentage:>5.1f}%")


if __name__ == "__main__":
    asyncio.run(main())
