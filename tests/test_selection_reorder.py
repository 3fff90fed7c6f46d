import pytest

from langprefs.editing.selection_reorder import (
    Row,
    SelectionRange,
    SelectionRangeError,
    interpret_key_command,
    move_selection,
    move_selection_down,
    move_selection_up,
    selected_items,
    selection_from_rows,
    validate_selection,
)


def codes(rows):
    return "".join(r.code for r in rows)


def test_move_up_block(letters):
    r = move_selection_up(letters, (SelectionRange(1, 2),))
    assert r.changed is True
    assert codes(r.rows) == "BCADE"
    assert r.selection == (SelectionRange(0, 1),)
    assert r.focus_row == 0


def test_move_up_at_top_is_noop(letters):
    first = move_selection_up(letters, (SelectionRange(1, 2),))
    again = move_selection_up(first.rows, first.selection)
    assert again.changed is False
    assert again.rows == first.rows
    assert again.selection == first.selection
    assert again.announcement == "No change"


def test_move_down_disjoint_ranges(letters):
    sel = (SelectionRange(0, 0), SelectionRange(2, 2))
    r = move_selection_down(letters, sel)
    assert codes(r.rows) == "BADCE"
    assert r.selection == (SelectionRange(1, 1), SelectionRange(3, 3))
    assert r.focus_row == 3


def test_move_down_at_bottom_is_noop(letters):
    sel = (SelectionRange(1, 1), SelectionRange(4, 4))
    r = move_selection_down(letters, sel)
    assert r.changed is False
    assert r.rows == letters
    assert r.selection == sel


def test_empty_selection_is_noop(letters):
    for fn in (move_selection_up, move_selection_down):
        r = fn(letters, ())
        assert r.changed is False
        assert r.rows == letters
        assert r.focus_row is None


def test_blocks_separated_by_single_row_merge_over_calls(letters):
    # A and C selected with B between them: moving down, B ends up above both
    sel = (SelectionRange(0, 0), SelectionRange(2, 2))
    r = move_selection_down(letters, sel)
    assert codes(r.rows) == "BADCE"
    # D separates them now; another step keeps every block moving by one
    r2 = move_selection_down(r.rows, r.selection)
    assert codes(r2.rows) == "BDAEC"
    assert r2.selection == (SelectionRange(2, 2), SelectionRange(4, 4))


def test_adjacent_ranges_move_together(letters):
    sel = (SelectionRange(2, 2), SelectionRange(3, 4))
    r = move_selection_up(letters, sel)
    assert codes(r.rows) == "ACDEB"
    assert r.selection == (SelectionRange(1, 1), SelectionRange(2, 3))


def test_inputs_not_mutated(letters):
    rows = list(letters)
    move_selection_up(rows, (SelectionRange(3, 4),))
    assert rows == list(letters)


def _run_length(picked, start, direction):
    count = 0
    while start + count * direction in picked:
        count += 1
    return count


def _all_selections(n):
    for mask in range(1, 2 ** n):
        yield selection_from_rows(i for i in range(n) if mask >> i & 1)


@pytest.mark.parametrize("fn, step", [(move_selection_up, -1), (move_selection_down, 1)])
def test_properties_over_all_selections(letters, fn, step):
    for sel in _all_selections(len(letters)):
        before = {r.code for r in selected_items(letters, sel)}
        r = fn(letters, sel)
        # permutation
        assert sorted(r.rows, key=lambda x: x.code) == sorted(letters, key=lambda x: x.code)
        # selected identities preserved
        assert {x.code for x in selected_items(r.rows, r.selection)} == before
        if not r.changed:
            assert r.rows == letters and r.selection == sel
            continue
        picked = {i for rng in sel for i in rng.rows()}
        old_index = {row.code: i for i, row in enumerate(letters)}
        for i, row in enumerate(r.rows):
            old = old_index[row.code]
            delta = i - old
            if row.code in before:
                assert delta == step
            else:
                # jumps over the adjacent selected run that moved past it
                assert delta == -step * _run_length(picked, old - step, -step)


def test_round_trip_restores_original(letters):
    for sel in _all_selections(len(letters)):
        up = move_selection_up(letters, sel)
        if up.changed:
            back = move_selection_down(up.rows, up.selection)
            assert back.changed
            assert back.rows == letters and back.selection == sel
        down = move_selection_down(letters, sel)
        if down.changed:
            back = move_selection_up(down.rows, down.selection)
            assert back.rows == letters and back.selection == sel


@pytest.mark.parametrize(
    "sel",
    [
        (SelectionRange(2, 1),),
        (SelectionRange(-1, 0),),
        (SelectionRange(3, 5),),
        (SelectionRange(0, 2), SelectionRange(2, 3)),
        (SelectionRange(3, 3), SelectionRange(0, 0)),
    ],
)
def test_malformed_selection_raises(letters, sel):
    with pytest.raises(SelectionRangeError):
        move_selection_up(letters, sel)
    with pytest.raises(SelectionRangeError):
        validate_selection(sel, len(letters))


def test_selection_from_rows_coalesces_runs():
    assert selection_from_rows([4, 0, 1, 1, 3]) == (
        SelectionRange(0, 1),
        SelectionRange(3, 4),
    )
    assert selection_from_rows([]) == ()


def test_range_helpers():
    rng = SelectionRange(2, 4)
    assert rng.row_count == 3
    assert list(rng.rows()) == [2, 3, 4]
    assert rng.shifted(-2) == SelectionRange(0, 2)


def test_announcement_counts_rows(letters):
    assert move_selection_down(letters, (SelectionRange(0, 0),)).announcement == (
        "Moved 1 language down."
    )
    assert move_selection_up(letters, (SelectionRange(1, 2),)).announcement == (
        "Moved 2 languages up."
    )


def test_move_selection_dispatch(letters):
    assert move_selection(letters, (SelectionRange(1, 1),), "up").rows[0].code == "B"
    with pytest.raises(ValueError):
        move_selection(letters, (SelectionRange(1, 1),), "sideways")


def test_interpret_key_command():
    assert interpret_key_command("Ctrl+Up") == "up"
    assert interpret_key_command("alt+down") == "down"
    assert interpret_key_command("home") == ""


def test_plain_arrows_do_not_reorder():
    assert interpret_key_command("up") == ""
    assert interpret_key_command("ArrowDown") == ""
