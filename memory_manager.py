from history import format_frames


class FrameTable:
    def __init__(self, num_frames=3):
        self.num_frames = num_frames
        # Each slot stores a page number or None if unoccupied
        self.frames = [None] * num_frames

    def find(self, page):
        for i, frame in enumerate(self.frames):
            if frame == page:
                return i
        return None

    def first_unoccupied(self):
        for i, frame in enumerate(self.frames):
            if frame is None:
                return i
        return None

    def place(self, slot, page):
        self.frames[slot] = page

    def occupied(self):
        return sum(1 for frame in self.frames if frame is not None)

    def is_full(self):
        return self.first_unoccupied() is None

    def snapshot(self):
        return tuple(self.frames)

    def __str__(self):
        return format_frames(self.frames)


class Statistics:
    def __init__(self, algorithm, reference_count):
        self.algorithm = algorithm
        self.reference_count = reference_count
        self.page_faults = 0
        self.page_hits = 0

    def record_hit(self):
        self.page_hits += 1

    def record_fault(self):
        self.page_faults += 1

    @property
    def fault_ratio(self):
        return self.page_faults / self.reference_count * 100

    @property
    def hit_ratio(self):
        return self.page_hits / self.reference_count * 100

    def __str__(self):
        return (f"Total Page References : {self.reference_count}\n"
                f"Total Page Faults     : {self.page_faults}\n"
                f"Total Page Hits       : {self.page_hits}\n"
                f"Page Fault Ratio      : {self.fault_ratio:.2f}%\n"
                f"Page Hit Ratio        : {self.hit_ratio:.2f}%")


def summarize(stats_list):
    """Index of the run with the fewest faults; the first one wins a tie."""
    best = 0
    for i in range(1, len(stats_list)):
        if stats_list[i].page_faults < stats_list[best].page_faults:
            best = i
    return best


def efficiency_vs_optimal(optimal_faults, policy_faults):
    if policy_faults < optimal_faults:
        raise AssertionError(
            f"Policy with {policy_faults} faults beat Optimal ({optimal_faults} faults)")
    if optimal_faults == 0:
        return 0.0
    efficiency = (optimal_faults - policy_faults) / optimal_faults * 100
    if efficiency < 0:
        efficiency = 0.0
    return efficiency
