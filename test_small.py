import os

from reference_input import load_input
from simulator import ALGORITHMS, VirtualMemorySimulator, compare_all_algorithms

TEST_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'test.txt')


def test_small():
    sim_input = load_input(TEST_FILE)
    assert sim_input.num_frames == 3
    assert sim_input.references == (1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5)

    expected_faults = {'FIFO': 9, 'LRU': 10, 'OPT': 7, 'SC': 9}

    for algorithm in ALGORITHMS:
        simulator = VirtualMemorySimulator(algorithm=algorithm, num_frames=sim_input.num_frames)
        stats = simulator.run_simulation(sim_input.references)
        assert stats.page_faults == expected_faults[algorithm]
        assert stats.page_hits == 12 - expected_faults[algorithm]


def test_small_comparison_picks_optimal():
    sim_input = load_input(TEST_FILE)
    result = compare_all_algorithms(sim_input.references, sim_input.num_frames)

    assert [s.algorithm for s in result.stats] == ['FIFO', 'LRU', 'Optimal', 'Second Chance']
    assert result.best_index == 2
    assert result.best.page_faults == 7
