import sys

import matplotlib.pyplot as plt

from reference_input import load_input
from simulator import compare_all_algorithms


def plot_comparison(result, output='algorithm_comparison.png', show=False):
    algorithms = [stats.algorithm for stats in result.stats]
    metrics = ['page_faults', 'page_hits']
    titles = ['Page Faults', 'Page Hits']

    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    for idx, (metric, title) in enumerate(zip(metrics, titles)):
        ax = axes[idx]
        values = [getattr(stats, metric) for stats in result.stats]

        x = range(len(algorithms))
        bars = ax.bar(x, values, 0.6)
        bars[result.best_index].set_edgecolor('black')
        bars[result.best_index].set_linewidth(2)

        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{int(height)}', ha='center', va='bottom', fontsize=9)

        ax.set_title(title)
        ax.set_xticks(list(x))
        ax.set_xticklabels(algorithms)
        ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return output


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: generate_graphs.py <input-file> [output.png]")
        return 1

    sim_input = load_input(argv[0])
    output = argv[1] if len(argv) > 1 else 'algorithm_comparison.png'

    print("Running simulations...")
    result = compare_all_algorithms(sim_input.references, sim_input.num_frames)
    plot_comparison(result, output, show=True)
    print(f"\nGraph saved as '{output}'")
    return 0


if __name__ == '__main__':
    sys.exit(main())
