ALGORITHM_NAMES = {
    'FIFO': 'FIFO',
    'LRU': 'LRU',
    'OPT': 'Optimal',
    'SC': 'Second Chance',
}


class Policy:
    """Per-run replacement state. Subclasses override the hooks they need."""

    def __init__(self, num_frames):
        self.num_frames = num_frames

    def on_fill(self, slot, step):
        pass

    def on_hit(self, slot, step):
        pass

    def on_replace(self, slot, step):
        self.on_fill(slot, step)

    def select_victim(self, frame_table, references, step):
        raise NotImplementedError


class FIFOPolicy(Policy):

    def __init__(self, num_frames):
        super().__init__(num_frames)
        # Fill goes in slot order, so the oldest page is always under the cursor
        self.position = 0

    def select_victim(self, frame_table, references, step):
        victim_frame = self.position
        self.position = (self.position + 1) % self.num_frames
        return victim_frame


class LRUPolicy(Policy):

    def __init__(self, num_frames):
        super().__init__(num_frames)
        self.last_used = [-1] * num_frames

    def on_fill(self, slot, step):
        self.last_used[slot] = step

    def on_hit(self, slot, step):
        self.last_used[slot] = step

    def select_victim(self, frame_table, references, step):
        victim_frame = 0
        lru_time = self.last_used[0]

        for frame_num in range(1, self.num_frames):
            if self.last_used[frame_num] < lru_time:
                lru_time = self.last_used[frame_num]
                victim_frame = frame_num

        return victim_frame


class OptimalPolicy(Policy):
    """Belady's rule: evict the resident page whose next reference is farthest away."""

    def select_victim(self, frame_table, references, step):
        max_future_time = -1
        victim_frame = 0

        for frame_num in range(self.num_frames):
            page = frame_table.frames[frame_num]

            next_ref_time = None
            for idx in range(step + 1, len(references)):
                if references[idx] == page:
                    next_ref_time = idx
                    break

            # No later reference: nothing can beat this slot
            if next_ref_time is None:
                return frame_num

            if next_ref_time > max_future_time:
                max_future_time = next_ref_time
                victim_frame = frame_num

        return victim_frame


class SecondChancePolicy(Policy):

    def __init__(self, num_frames):
        super().__init__(num_frames)
        self.reference_bits = [0] * num_frames
        self.pointer = 0
        self.last_scan_length = 0

    def on_fill(self, slot, step):
        self.reference_bits[slot] = 1

    def on_hit(self, slot, step):
        self.reference_bits[slot] = 1

    def select_victim(self, frame_table, references, step):
        # Every pass over a set bit clears it, so this stops within two sweeps
        self.last_scan_length = 0
        while True:
            self.last_scan_length += 1
            if self.reference_bits[self.pointer] == 0:
                victim_frame = self.pointer
                self.pointer = (self.pointer + 1) % self.num_frames
                return victim_frame
            self.reference_bits[self.pointer] = 0
            self.pointer = (self.pointer + 1) % self.num_frames


POLICIES = {
    'FIFO': FIFOPolicy,
    'LRU': LRUPolicy,
    'OPT': OptimalPolicy,
    'SC': SecondChancePolicy,
}


def create_policy(algorithm, num_frames):
    if algorithm not in POLICIES:
        raise ValueError(f"Unknown algorithm: {algorithm}")
    return POLICIES[algorithm](num_frames)
