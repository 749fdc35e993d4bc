import argparse
import sys

from history import FAULT, HIT, SimulationHistory
from memory_manager import FrameTable, Statistics, summarize
from policies import ALGORITHM_NAMES, create_policy
from reference_input import (
    MAX_FRAMES,
    MAX_PAGES,
    InvalidFrameCount,
    InvalidReferenceLength,
    MalformedPersistedInput,
    generate_random_input,
    load_input,
    read_keyboard_input,
    save_input,
    validate_frame_count,
    validate_references,
)
from report import format_comparison, format_stats, write_report

ALGORITHMS = ['FIFO', 'LRU', 'OPT', 'SC']


class SimulationContext:
    """Everything one run mutates. Built fresh for every run and dropped afterwards."""

    def __init__(self, algorithm, num_frames, references):
        self.references = references
        self.frame_table = FrameTable(num_frames)
        self.policy = create_policy(algorithm, num_frames)
        self.stats = Statistics(ALGORITHM_NAMES[algorithm], len(references))
        self.history = SimulationHistory()


class VirtualMemorySimulator:

    def __init__(self, algorithm='FIFO', num_frames=3, verbose=False,
                 max_frames=MAX_FRAMES, max_pages=MAX_PAGES):
        if algorithm not in ALGORITHM_NAMES:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        validate_frame_count(num_frames, max_frames)
        self.algorithm = algorithm
        self.num_frames = num_frames
        self.verbose = verbose
        self.max_pages = max_pages
        self.history = SimulationHistory()
        self.stats = None

    @property
    def name(self):
        return ALGORITHM_NAMES[self.algorithm]

    def handle_reference(self, context, step, page):
        frame_num = context.frame_table.find(page)

        if frame_num is not None:
            context.stats.record_hit()
            context.policy.on_hit(frame_num, step)
            status = HIT
        else:
            context.stats.record_fault()
            self.handle_page_fault(context, step, page)
            status = FAULT

        entry = context.history.record(step, page, status, context.frame_table.snapshot())
        if self.verbose:
            print(f"{step + 1}\t{page}\t{status}\t\t{context.frame_table}")
        return entry

    def handle_page_fault(self, context, step, page):
        frame_num = context.frame_table.first_unoccupied()

        if frame_num is None:
            frame_num = context.policy.select_victim(context.frame_table, context.references, step)
            context.frame_table.place(frame_num, page)
            context.policy.on_replace(frame_num, step)
        else:
            # Free frame available
            context.frame_table.place(frame_num, page)
            context.policy.on_fill(frame_num, step)

        return frame_num

    def run_simulation(self, references):
        references = tuple(references)
        validate_references(references, self.max_pages)

        context = SimulationContext(self.algorithm, self.num_frames, references)

        if self.verbose:
            print(f"\n{'='*40}")
            print(f"   {self.name} Algorithm Simulation")
            print(f"{'='*40}")
            print("\nStep\tPage\tStatus\t\tFrames")
            print("----\t----\t------\t\t------")

        for step, page in enumerate(references):
            self.handle_reference(context, step, page)

        self.history = context.history
        self.stats = context.stats

        if self.verbose:
            print()
            print(format_stats(self.stats))

        return self.stats


class ComparisonResult:
    def __init__(self, stats, histories):
        self.stats = stats
        self.histories = histories
        self.best_index = summarize(stats)

    @property
    def best(self):
        return self.stats[self.best_index]

    def get(self, algorithm):
        return self.stats[ALGORITHMS.index(algorithm)]


def compare_all_algorithms(references, num_frames, verbose=False,
                           max_frames=MAX_FRAMES, max_pages=MAX_PAGES):
    stats = []
    histories = []
    for algorithm in ALGORITHMS:
        simulator = VirtualMemorySimulator(algorithm, num_frames, verbose=verbose,
                                           max_frames=max_frames, max_pages=max_pages)
        stats.append(simulator.run_simulation(references))
        histories.append(simulator.history)
    return ComparisonResult(stats, histories)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Simulate FIFO, LRU, Optimal and Second Chance page replacement.')
    parser.add_argument('input', nargs='?',
                        help='input file: frames, page count, then the page references')
    parser.add_argument('-a', '--algorithm', choices=ALGORITHMS, default='FIFO',
                        help='algorithm for a single run (default: FIFO)')
    parser.add_argument('--compare', action='store_true', help='run and compare all algorithms')
    parser.add_argument('--history', action='store_true',
                        help='print the step-by-step history of each run')
    parser.add_argument('--frames', type=int,
                        help='number of frames (overrides the input file, required with --random)')
    parser.add_argument('--random', nargs=2, type=int, metavar=('PAGES', 'MAX_PAGE'),
                        help='generate a random reference string')
    parser.add_argument('--seed', type=int, help='seed for --random')
    parser.add_argument('--interactive', action='store_true', help='enter input from the keyboard')
    parser.add_argument('--save', metavar='FILE', help='save the input to FILE')
    parser.add_argument('--report', metavar='FILE', help='write a performance report to FILE')
    parser.add_argument('--graph', metavar='FILE', help='save a comparison chart to FILE')
    parser.add_argument('--max-frames', type=int, default=MAX_FRAMES)
    parser.add_argument('--max-pages', type=int, default=MAX_PAGES)
    parser.add_argument('-v', '--verbose', action='store_true', help='print every step')
    args = parser.parse_args(argv)

    if args.input is None and args.random is None and not args.interactive:
        parser.error('an input file, --random or --interactive is required')
    if args.random is not None and args.frames is None:
        parser.error('--random requires --frames')
    if args.interactive and args.frames is not None:
        parser.error('--frames cannot be used with --interactive')
    return args


def get_input(args):
    if args.interactive:
        return read_keyboard_input(max_frames=args.max_frames, max_pages=args.max_pages)
    if args.random is not None:
        num_pages, max_page = args.random
        return generate_random_input(args.frames, num_pages, max_page, seed=args.seed,
                                     max_frames=args.max_frames, max_pages=args.max_pages)
    return load_input(args.input, max_frames=args.max_frames, max_pages=args.max_pages,
                      num_frames_override=args.frames)


def main(argv=None):
    args = parse_args(argv)

    try:
        sim_input = get_input(args)
    except (InvalidFrameCount, InvalidReferenceLength, MalformedPersistedInput, OSError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Frames: {sim_input.num_frames}")
    print(f"Pages: {sim_input.num_pages}")
    print("Reference String: " + " ".join(str(page) for page in sim_input.references))

    try:
        if args.save:
            save_input(args.save, sim_input)
            print(f"Data saved to {args.save} successfully!")

        if args.compare or args.report or args.graph:
            result = compare_all_algorithms(sim_input.references, sim_input.num_frames,
                                            verbose=args.verbose, max_frames=args.max_frames,
                                            max_pages=args.max_pages)
            print("\n" + format_comparison(result))

            if args.report:
                write_report(args.report, sim_input, result)
                print(f"\nReport generated successfully: {args.report}")

            if args.graph:
                from generate_graphs import plot_comparison
                plot_comparison(result, args.graph)
                print(f"\nGraph saved as '{args.graph}'")

            if args.compare and args.history:
                for stats, history in zip(result.stats, result.histories):
                    print(f"\n--- {stats.algorithm} History ---")
                    print(history.format_table())

        if not args.compare:
            simulator = VirtualMemorySimulator(args.algorithm, sim_input.num_frames,
                                               verbose=args.verbose, max_frames=args.max_frames,
                                               max_pages=args.max_pages)
            stats = simulator.run_simulation(sim_input.references)
            print(f"\nResults ({simulator.name}):")
            print(stats)
            if args.history:
                print()
                print(simulator.history.format_table())
    except OSError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
