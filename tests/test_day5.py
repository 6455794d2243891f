import pytest

from adventsolve.day5 import (
    FreshIngredientRange,
    merge_ranges,
    parse_inventory,
    run,
    solve,
)

EXAMPLE = ["3-5", "10-14", "16-20", "12-18", "", "1", "5", "8", "11", "17", "32"]


def test_overlap():
    a = FreshIngredientRange(0, 1)
    b = FreshIngredientRange(1, 2)
    assert a.overlaps(b) is True


def test_no_overlap():
    a = FreshIngredientRange(0, 0)
    b = FreshIngredientRange(1, 1)
    assert a.overlaps(b) is False


def test_fresh_ing():
    a = FreshIngredientRange(0, 0)
    assert a.num_fresh() == 1


def test_big_overlaps_small():
    a = FreshIngredientRange(0, 3)
    b = FreshIngredientRange(1, 2)
    assert a.overlaps(b) is True


def test_small_overlaps_big():
    a = FreshIngredientRange(0, 3)
    b = FreshIngredientRange(1, 2)
    assert b.overlaps(a) is True


def test_enclosed_union():
    a = FreshIngredientRange(0, 3)
    b = FreshIngredientRange(1, 2)
    c = a.union(b)
    d = b.union(a)
    assert (c.start, c.stop) == (0, 3)
    assert (d.start, d.stop) == (0, 3)


def test_union():
    a = FreshIngredientRange(0, 1)
    b = FreshIngredientRange(1, 2)
    c = a.union(b)
    d = b.union(a)
    assert (c.start, c.stop) == (0, 2)
    assert (d.start, d.stop) == (0, 2)


def test_is_fresh_bounds():
    r = FreshIngredientRange(3, 5)
    assert r.is_fresh(3) and r.is_fresh(5)
    assert not r.is_fresh(2)
    assert not r.is_fresh(6)


def test_reversed_range_count_raises():
    with pytest.raises(ValueError):
        FreshIngredientRange(10, 2).num_fresh()


def test_parse_inventory():
    ranges, ingredients = parse_inventory(line + "\n" for line in EXAMPLE)
    assert ranges[0] == FreshIngredientRange(3, 5)
    assert ranges[-1] == FreshIngredientRange(12, 18)
    assert ingredients == [1, 5, 8, 11, 17, 32]


def test_parse_inventory_rejects_missing_dash():
    with pytest.raises(ValueError):
        parse_inventory(["35", "", "1"])


def test_parse_inventory_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_inventory(["3-5", "", "abc"])


def test_merge_ranges_is_disjoint_and_covers_same_ids():
    ranges, _ = parse_inventory(EXAMPLE)
    merged = merge_ranges(ranges)
    assert all(
        not a.overlaps(b)
        for i, a in enumerate(merged)
        for j, b in enumerate(merged)
        if i != j
    )
    original = {n for r in ranges for n in range(r.start, r.stop + 1)}
    covered = {n for r in merged for n in range(r.start, r.stop + 1)}
    assert covered == original


def test_merge_ranges_keeps_input_untouched():
    ranges = [FreshIngredientRange(0, 1), FreshIngredientRange(1, 2)]
    merged = merge_ranges(ranges)
    assert merged == [FreshIngredientRange(0, 2)]
    assert len(ranges) == 2


def test_example_solution():
    assert solve(EXAMPLE) == (3, 14)


def test_run_reads_file(tmp_path, capsys):
    path = tmp_path / "cafe.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert run(str(path)) == (3, 14)
    out = capsys.readouterr().out
    assert "There are 3 fresh ing" in out
    assert "There are 14 fresh ids" in out