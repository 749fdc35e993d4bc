import random
import time

MAX_FRAMES = 10
MAX_PAGES = 50

DEFAULT_FRAMES = 3
DEFAULT_PAGES = 10
DEFAULT_MAX_PAGE = 9


class InvalidFrameCount(ValueError):
    pass


class InvalidReferenceLength(ValueError):
    pass


class MalformedPersistedInput(ValueError):
    pass


def validate_frame_count(num_frames, max_frames=MAX_FRAMES):
    if num_frames < 1 or num_frames > max_frames:
        raise InvalidFrameCount(
            f"Invalid number of frames ({num_frames}). Must be between 1 and {max_frames}.")


def validate_references(references, max_pages=MAX_PAGES):
    if len(references) < 1 or len(references) > max_pages:
        raise InvalidReferenceLength(
            f"Invalid number of pages ({len(references)}). Must be between 1 and {max_pages}.")


class SimulationInput:
    def __init__(self, num_frames, references, max_frames=MAX_FRAMES, max_pages=MAX_PAGES):
        validate_frame_count(num_frames, max_frames)
        validate_references(references, max_pages)
        self.num_frames = num_frames
        self.references = tuple(references)

    @property
    def num_pages(self):
        return len(self.references)

    def __eq__(self, other):
        if not isinstance(other, SimulationInput):
            return NotImplemented
        return self.num_frames == other.num_frames and self.references == other.references

    def __repr__(self):
        return f"SimulationInput(num_frames={self.num_frames}, references={list(self.references)})"


def _parse_int(token, what):
    try:
        return int(token)
    except ValueError:
        raise MalformedPersistedInput(f"Invalid file format. Expected {what}, got {token!r}.")


def load_input(filename, max_frames=MAX_FRAMES, max_pages=MAX_PAGES, num_frames_override=None):
    with open(filename, 'r') as f:
        try:
            tokens = f.read().split()
        except UnicodeDecodeError:
            raise MalformedPersistedInput("Invalid file format. File is not readable text.")

    if len(tokens) < 1:
        raise MalformedPersistedInput("Invalid file format. Expected number of frames.")
    num_frames = _parse_int(tokens[0], "number of frames")

    if len(tokens) < 2:
        raise MalformedPersistedInput("Invalid file format. Expected number of pages.")
    num_pages = _parse_int(tokens[1], "number of pages")

    if num_frames_override is not None:
        num_frames = num_frames_override
    validate_frame_count(num_frames, max_frames)
    if num_pages < 1 or num_pages > max_pages:
        raise InvalidReferenceLength(
            f"Invalid number of pages in file ({num_pages}). Must be between 1 and {max_pages}.")

    references = []
    for i in range(num_pages):
        if 2 + i >= len(tokens):
            raise MalformedPersistedInput(
                f"Invalid file format. Not enough page references (expected {num_pages}, got {i}).")
        page = _parse_int(tokens[2 + i], "page reference")
        if page < 0:
            print(f"Warning: Negative page number found at position {i + 1}. Using absolute value.")
            page = abs(page)
        references.append(page)

    return SimulationInput(num_frames, references, max_frames, max_pages)


def save_input(filename, sim_input):
    with open(filename, 'w') as f:
        f.write(f"{sim_input.num_frames}\n")
        f.write(f"{sim_input.num_pages}\n")
        f.write(" ".join(str(page) for page in sim_input.references))
        f.write("\n")


def generate_random_input(num_frames, num_pages, max_page, seed=None,
                          max_frames=MAX_FRAMES, max_pages=MAX_PAGES):
    if num_frames < 1 or num_frames > max_frames:
        print(f"Error: Invalid number of frames. Must be between 1 and {max_frames}. "
              f"Using default {DEFAULT_FRAMES}.")
        num_frames = DEFAULT_FRAMES

    if num_pages < 1 or num_pages > max_pages:
        print(f"Error: Invalid number of pages. Must be between 1 and {max_pages}. "
              f"Using default {DEFAULT_PAGES}.")
        num_pages = DEFAULT_PAGES

    if max_page <= 0:
        print(f"Error: Maximum page number must be > 0. Using default {DEFAULT_MAX_PAGE}.")
        max_page = DEFAULT_MAX_PAGE

    if seed is None:
        random.seed(int(time.time() * 1000000) % (2**31))
    else:
        random.seed(seed)

    references = [random.randint(0, max_page) for _ in range(num_pages)]
    return SimulationInput(num_frames, references, max_frames, max_pages)


def _ask_int(input_func, prompt):
    while True:
        answer = input_func(prompt)
        try:
            return int(answer)
        except ValueError:
            print(f"Please enter a whole number (got {answer!r}).")


def read_keyboard_input(input_func=None, max_frames=MAX_FRAMES, max_pages=MAX_PAGES):
    if input_func is None:
        input_func = input

    print("\n--- Manual Input ---")
    num_frames = _ask_int(input_func, f"Enter number of frames (1-{max_frames}): ")
    if num_frames < 1 or num_frames > max_frames:
        print(f"Invalid! Using default {DEFAULT_FRAMES} frames.")
        num_frames = DEFAULT_FRAMES

    num_pages = _ask_int(input_func, f"Enter number of pages (1-{max_pages}): ")
    if num_pages < 1 or num_pages > max_pages:
        print(f"Invalid! Using default {DEFAULT_PAGES} pages.")
        num_pages = DEFAULT_PAGES

    print("Enter page reference string:")
    references = []
    for i in range(num_pages):
        page = _ask_int(input_func, f"Page {i + 1}: ")
        if page < 0:
            print("Warning: Negative page number entered. Using absolute value.")
            page = abs(page)
        references.append(page)

    return SimulationInput(num_frames, references, max_frames, max_pages)
