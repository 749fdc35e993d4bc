HIT = 'HIT'
FAULT = 'FAULT'


def format_frames(frames):
    return "[" + "".join(" - " if f is None else f" {f} " for f in frames) + "]"


class StepRecord:
    def __init__(self, step, page, status, frames):
        self.step = step
        self.page = page
        self.status = status  # HIT or FAULT
        self.frames = tuple(frames)

    def __eq__(self, other):
        if not isinstance(other, StepRecord):
            return NotImplemented
        return (self.step, self.page, self.status, self.frames) == \
            (other.step, other.page, other.status, other.frames)

    def __repr__(self):
        return f"StepRecord({self.step}, {self.page}, {self.status}, {self.frames})"


class SimulationHistory:
    def __init__(self):
        self.records = []

    def record(self, step, page, status, frames):
        entry = StepRecord(step, page, status, frames)
        self.records.append(entry)
        return entry

    def statuses(self):
        return [entry.status for entry in self.records]

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    def format_table(self):
        if not self.records:
            return "No simulation history available!"

        lines = [
            "Step | Page | Status | Frame Contents",
            "-----|------|--------|----------------",
        ]
        for entry in self.records:
            lines.append(f"{entry.step + 1:4d} | {entry.page:4d} | {entry.status:>6s} | "
                         f"{format_frames(entry.frames)}")
        return "\n".join(lines)
