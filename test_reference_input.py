import pytest

from reference_input import (
    DEFAULT_FRAMES,
    DEFAULT_PAGES,
    InvalidFrameCount,
    InvalidReferenceLength,
    MalformedPersistedInput,
    SimulationInput,
    generate_random_input,
    load_input,
    read_keyboard_input,
    save_input,
)


def write(tmp_path, text):
    path = tmp_path / 'input.txt'
    path.write_text(text)
    return str(path)


def test_save_then_load(tmp_path):
    sim_input = SimulationInput(4, [7, 0, 1, 2, 0, 3, 0, 4])
    path = str(tmp_path / 'saved.txt')
    save_input(path, sim_input)

    assert load_input(path) == sim_input
    assert open(path).read() == "4\n8\n7 0 1 2 0 3 0 4\n"


def test_load_accepts_any_whitespace(tmp_path):
    sim_input = load_input(write(tmp_path, "2 5\n1\n2 3\t4 5"))
    assert sim_input.num_frames == 2
    assert sim_input.references == (1, 2, 3, 4, 5)


def test_load_coerces_negative_pages(tmp_path, capsys):
    sim_input = load_input(write(tmp_path, "3\n3\n1 -4 2\n"))
    assert sim_input.references == (1, 4, 2)
    assert "position 2" in capsys.readouterr().out


@pytest.mark.parametrize('text', ["", "3", "3\nabc\n1 2", "x\n2\n1 2", "3\n2\n1 two"])
def test_load_malformed(tmp_path, text):
    with pytest.raises(MalformedPersistedInput):
        load_input(write(tmp_path, text))


def test_load_reports_short_reference_string(tmp_path):
    with pytest.raises(MalformedPersistedInput, match="expected 5, got 2"):
        load_input(write(tmp_path, "3\n5\n1 2\n"))


def test_load_out_of_range(tmp_path):
    with pytest.raises(InvalidFrameCount):
        load_input(write(tmp_path, "11\n2\n1 2\n"))
    with pytest.raises(InvalidReferenceLength):
        load_input(write(tmp_path, "3\n0\n"))
    with pytest.raises(InvalidReferenceLength):
        load_input(write(tmp_path, "3\n51\n" + " 1" * 51))


def test_load_with_lifted_limits(tmp_path):
    sim_input = load_input(write(tmp_path, "12\n2\n1 2\n"), max_frames=16)
    assert sim_input.num_frames == 12


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_input(str(tmp_path / 'missing.txt'))


def test_input_errors_are_value_errors():
    with pytest.raises(ValueError):
        SimulationInput(3, [])
    with pytest.raises(ValueError):
        SimulationInput(0, [1])


def test_random_input_is_seeded():
    first = generate_random_input(3, 20, 5, seed=7)
    second = generate_random_input(3, 20, 5, seed=7)
    assert first == second
    assert first.num_pages == 20
    assert all(0 <= page <= 5 for page in first.references)


def test_random_input_falls_back_to_defaults(capsys):
    sim_input = generate_random_input(0, 99, 0, seed=1)
    assert sim_input.num_frames == DEFAULT_FRAMES
    assert sim_input.num_pages == DEFAULT_PAGES
    assert all(0 <= page <= 9 for page in sim_input.references)
    assert "Using default" in capsys.readouterr().out


def test_keyboard_input():
    answers = iter(['2', 'four', '4', '1', '-2', '1', '3'])
    sim_input = read_keyboard_input(input_func=lambda prompt: next(answers))
    assert sim_input == SimulationInput(2, [1, 2, 1, 3])


def test_keyboard_input_invalid_counts_use_defaults():
    answers = iter(['0', '1'] + ['5'])
    sim_input = read_keyboard_input(input_func=lambda prompt: next(answers))
    assert sim_input.num_frames == DEFAULT_FRAMES
    assert sim_input.references == (5,)


def test_load_binary_file_is_malformed(tmp_path):
    path = tmp_path / 'binary.txt'
    path.write_bytes(b"3\n3\n1 \xff\xfe 2\n")
    with pytest.raises(MalformedPersistedInput, match="Invalid file format"):
        load_input(str(path))


def test_main_reports_binary_file(tmp_path, capsys):
    from simulator import main

    path = tmp_path / 'binary.txt'
    path.write_bytes(b"3\n3\n1 \xff\xfe 2\n")
    assert main([str(path)]) == 1
    assert "Error: Invalid file format" in capsys.readouterr().out


def test_load_frame_override_skips_file_frame_count(tmp_path):
    path = write(tmp_path, "12\n3\n1 2 3\n")
    with pytest.raises(InvalidFrameCount):
        load_input(path)

    sim_input = load_input(path, num_frames_override=2)
    assert sim_input.num_frames == 2
    assert sim_input.references == (1, 2, 3)

    with pytest.raises(InvalidFrameCount):
        load_input(path, num_frames_override=0)
