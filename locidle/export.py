from __future__ import annotations

import csv
import json
from pathlib import Path

from locidle.report import SimulationReport


def export_csv(report: SimulationReport, path: str | Path) -> None:
    """Export simulation data as CSV files.

    Creates two files:
      - {path}_samples.csv
      - {path}_purchases.csv
    """
    base = str(path)

    with open(f"{base}_samples.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "locs", "available_funds", "loc_per_sec", "loc_price"])
        for s in report.samples:
            writer.writerow([s.time, s.locs, s.available_funds, s.loc_per_sec, s.loc_price])

    with open(f"{base}_purchases.csv", "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["time", "action", "cost"])
        for p in report.purchases:
            writer.writerow([p.time, p.action, p.cost])


def export_json(report: SimulationReport, path: str | Path) -> None:
    """Export the simulation summary as JSON. Decimals are written as strings."""
    data = {
        "strategy": report.strategy_description,
        "total_time": report.total_time,
        "upgrade_times": report.upgrade_times,
        "purchase_count": len(report.purchases),
        "purchases_per_minute": report.purchases_per_minute,
        "max_purchase_gap": report.max_purchase_gap,
        "mean_purchase_gap": report.mean_purchase_gap,
        "final": None,
        "purchases": [
            {"time": p.time, "action": p.action, "cost": str(p.cost)}
            for p in report.purchases
        ],
    }
    if report.samples:
        final = report.samples[-1]
        data["final"] = {
            "locs": str(final.locs),
            "available_funds": str(final.available_funds),
            "loc_per_sec": str(final.loc_per_sec),
            "loc_price": str(final.loc_price),
        }
    with open(str(path), "w") as f:
        json.dump(data, f, indent=2)
