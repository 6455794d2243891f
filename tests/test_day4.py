from adventsolve.day4 import is_accessible, remove_rolls, run, solve

EXAMPLE = [
    "..@@.@@@@.",
    "@@@.@.@.@@",
    "@@@@@.@.@@",
    "@.@@@@..@.",
    "@@.@@@@.@@",
    ".@@@@@@@.@",
    ".@.@.@.@@@",
    "@.@@@.@@@@",
    ".@@@@@@@@.",
    "@.@.@@@.@.",
]
EXAMPLE_TOTAL = 43


def _floor(lines):
    return [list(line) for line in lines]


def test_example_total():
    assert solve(EXAMPLE) == EXAMPLE_TOTAL


def test_trailing_newlines_are_ignored():
    assert solve(line + "\n" for line in EXAMPLE) == EXAMPLE_TOTAL


def test_center_of_full_block_is_not_accessible():
    floor = _floor(["@@@", "@@@", "@@@"])
    assert is_accessible(floor, 1, 1) is False


def test_corner_of_full_block_is_accessible():
    floor = _floor(["@@@", "@@@", "@@@"])
    assert is_accessible(floor, 0, 0) is True
    assert is_accessible(floor, 2, 2) is True


def test_isolated_rolls_are_all_removed():
    lines = ["@.@.@", ".....", "@...@"]
    assert solve(lines) == "".join(lines).count("@")


def test_empty_floor_removes_nothing():
    lines = ["....", "...."]
    assert solve(lines) == "".join(lines).count("@")


def test_remove_rolls_mutates_floor_and_counts():
    floor = _floor(EXAMPLE)
    before = sum(row.count("@") for row in floor)
    removed = remove_rolls(floor)
    after = sum(row.count("@") for row in floor)
    assert removed > 0
    assert before - after == removed


def test_final_floor_has_no_accessible_roll():
    floor = _floor(EXAMPLE)
    initial = sum(row.count("@") for row in floor)
    total = 0
    while removed := remove_rolls(floor):
        total += removed
    remaining = [
        (x, y)
        for y, row in enumerate(floor)
        for x, cell in enumerate(row)
        if cell == "@"
    ]
    assert total == solve(EXAMPLE)
    assert total + len(remaining) == initial
    assert not any(is_accessible(floor, x, y) for x, y in remaining)


def test_run_reads_file(tmp_path, capsys):
    path = tmp_path / "forklift.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert run(str(path)) == EXAMPLE_TOTAL
    assert f"Removed {EXAMPLE_TOTAL} rolls" in capsys.readouterr().out