from stepper.matching.dedupe import count_leading_skipped, find_steps_to_skip

from conftest import make_steps


def test_find_steps_to_skip_matches_any_completed_text():
    steps = make_steps("f", "Restart the router", "Reset the SMC", "Check airplane mode is off")
    completed = ["Check airplane mode is off", "restart the ROUTER"]

    assert find_steps_to_skip(steps, completed) == {0, 2}


def test_find_steps_to_skip_without_completed_work():
    steps = make_steps("f", "Restart the router")
    assert find_steps_to_skip(steps, []) == set()


def test_whole_text_comparison_only():
    # A completed step that merely contains the candidate text is not a duplicate
    steps = make_steps("f", "Reset NVRAM")
    completed = ["Reset NVRAM then restart the computer and wait for the chime"]
    assert find_steps_to_skip(steps, completed) == set()


def test_count_leading_skipped_stops_at_first_gap():
    assert count_leading_skipped({0, 2}, 3) == 1
    assert count_leading_skipped({1, 2}, 3) == 0
    assert count_leading_skipped({0, 1, 2}, 3) == 3
    assert count_leading_skipped(set(), 0) == 0
