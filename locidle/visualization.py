from __future__ import annotations

from locidle.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 4-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install locidle[viz]"
        )

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"LOC Idle Simulation: {report.strategy_description}", fontsize=14)

    times = [s.time for s in report.samples]

    # 1. Lines of code (log scale)
    ax1 = axes[0][0]
    if times:
        ax1.plot(times, [max(float(s.locs), 1e-10) for s in report.samples])
    ax1.set_yscale("log")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("LOC")
    ax1.set_title("Lines of Code")
    ax1.grid(True, alpha=0.3)

    # 2. Production rate and price
    ax2 = axes[0][1]
    if times:
        ax2.plot(times, [float(s.loc_per_sec) for s in report.samples], label="LOC/s")
        ax2.plot(times, [float(s.loc_price) for s in report.samples], label="$/LOC")
    ax2.set_xlabel("Time (s)")
    ax2.set_title("Rates")
    ax2.legend(fontsize=8)
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[1][0]
    if report.purchases:
        actions = [p.action for p in report.purchases]
        kinds = sorted(set(actions))
        y_map = {a: i for i, a in enumerate(kinds)}
        ax3.scatter(
            [p.time for p in report.purchases],
            [y_map[a] for a in actions],
            s=10,
            alpha=0.6,
        )
        ax3.set_yticks(range(len(kinds)))
        ax3.set_yticklabels(kinds, fontsize=7)
        ax3.set_xlabel("Time (s)")
        ax3.set_title("Purchase Timeline")
        ax3.grid(True, alpha=0.3)

    # 4. Funds
    ax4 = axes[1][1]
    if times:
        ax4.plot(times, [float(s.available_funds) for s in report.samples])
    ax4.set_xlabel("Time (s)")
    ax4.set_ylabel("$")
    ax4.set_title("Available Funds")
    ax4.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()
