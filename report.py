from datetime import datetime

from memory_manager import efficiency_vs_optimal

OPTIMAL_NAME = 'Optimal'


def format_stats(stats):
    return (f"{'='*40}\n"
            f"        SIMULATION STATISTICS\n"
            f"{'='*40}\n"
            f"{stats}\n"
            f"{'='*40}")


def format_comparison(result):
    lines = [
        "=" * 40,
        "     COMPARISON SUMMARY",
        "=" * 40,
        "",
        f"{'Algorithm':<20} {'Faults':>6} {'Hits':>6} {'Fault %':>9}",
        "-" * 48,
    ]
    for stats in result.stats:
        lines.append(f"{stats.algorithm:<20} {stats.page_faults:>6} {stats.page_hits:>6} "
                     f"{stats.fault_ratio:>8.2f}%")

    lines.append("")
    lines.append(f">>> Best Algorithm: {result.best.algorithm} "
                 f"(Minimum Faults: {result.best.page_faults})")
    lines.append("=" * 40)
    return "\n".join(lines)


def write_report(filename, sim_input, result, generated_on=None):
    if generated_on is None:
        generated_on = datetime.now()
    optimal = next(s for s in result.stats if s.algorithm == OPTIMAL_NAME)

    with open(filename, 'w') as fp:
        fp.write("========================================\n")
        fp.write("  VIRTUAL MEMORY PAGING SIMULATOR\n")
        fp.write("     PERFORMANCE REPORT\n")
        fp.write("========================================\n\n")
        fp.write(f"Generated on: {generated_on:%Y-%m-%d %H:%M:%S}\n\n")

        fp.write("INPUT CONFIGURATION:\n")
        fp.write("-------------------\n")
        fp.write(f"Number of Frames: {sim_input.num_frames}\n")
        fp.write(f"Number of Pages: {sim_input.num_pages}\n")
        fp.write("Reference String: " + " ".join(str(p) for p in sim_input.references) + "\n\n")

        fp.write("ALGORITHM COMPARISON:\n")
        fp.write("--------------------\n")
        fp.write(f"{'Algorithm':<20} | {'Faults':>8} | {'Hits':>8} | {'Fault %':>10} | {'Hit %':>10}\n")
        fp.write("---------------------|----------|----------|------------|------------\n")
        for stats in result.stats:
            fp.write(f"{stats.algorithm:<20} | {stats.page_faults:>8} | {stats.page_hits:>8} | "
                     f"{stats.fault_ratio:>9.2f}% | {stats.hit_ratio:>9.2f}%\n")

        best = result.best
        fp.write("\n")
        fp.write(f">>> Best Algorithm: {best.algorithm} (Minimum Faults: {best.page_faults}, "
                 f"Hit Ratio: {best.hit_ratio:.2f}%)\n")

        fp.write("\nDETAILED STATISTICS:\n")
        fp.write("-------------------\n")
        for stats in result.stats:
            fp.write(f"\n{stats.algorithm} Algorithm:\n")
            fp.write(f"  Total Page References: {stats.reference_count}\n")
            fp.write(f"  Total Page Faults:     {stats.page_faults}\n")
            fp.write(f"  Total Page Hits:       {stats.page_hits}\n")
            fp.write(f"  Page Fault Ratio:      {stats.fault_ratio:.2f}%\n")
            fp.write(f"  Page Hit Ratio:        {stats.hit_ratio:.2f}%\n")

        fp.write("\nPERFORMANCE ANALYSIS:\n")
        fp.write("--------------------\n")
        fp.write(f"Optimal Algorithm Performance: {optimal.page_faults} faults (theoretical best)\n")
        for stats in result.stats:
            if stats is optimal:
                continue
            efficiency = efficiency_vs_optimal(optimal.page_faults, stats.page_faults)
            fp.write(f"{stats.algorithm} vs Optimal: {efficiency:.2f}% efficiency (")
            if stats.page_faults == optimal.page_faults:
                fp.write("Equal to optimal)\n")
            else:
                fp.write(f"{stats.page_faults - optimal.page_faults} more faults)\n")

        fp.write("\n========================================\n")
        fp.write("End of Report\n")
        fp.write("========================================\n")
