from __future__ import annotations

from locidle.report import SimulationReport
from locidle.view import format_amount


def format_text_report(report: SimulationReport) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " LOC Idle Simulation Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Duration: {report.total_time:.1f}s")
    lines.append("")

    if report.samples:
        final = report.samples[-1]
        lines.append("FINAL STATE:")
        lines.append(f"  Lines of code: {format_amount(final.locs, 0)}")
        lines.append(f"  Funds:         $ {format_amount(final.available_funds)}")
        lines.append(f"  LOC/s:         {format_amount(final.loc_per_sec)}")
        lines.append(f"  Price per LOC: $ {format_amount(final.loc_price)}")
        if report.final_view is not None:
            lines.append(f"  Coders:        {report.final_view.coders}")
            lines.append(f"  AI hype:       {report.final_view.ai_hype}")
        lines.append("")

    # Upgrades
    if report.upgrade_times:
        lines.append("UPGRADES:")
        for name, t in sorted(report.upgrade_times.items(), key=lambda kv: kv[1]):
            lines.append(f"  * {name:.<30s} {t:.1f}s")
        lines.append("")

    # Purchase summary
    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    lines.append(f"  Rate: {report.purchases_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_purchase_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_purchase_gap:.1f}s")

    return "\n".join(lines)
