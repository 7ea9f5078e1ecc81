import pytest

from tinytwin.animation import Animation


def test_starts_at_first_frame():
    anim = Animation(["a", "b", "c"], [10, 20, 30])
    assert anim.current_frame() == "a"
    assert anim.current_delay() == 10


def test_advance_moves_through_frames():
    anim = Animation(["a", "b", "c"], [10, 20, 30])
    seen = []
    for _ in range(3):
        seen.append((anim.current_frame(), anim.current_delay()))
        anim.advance()
    assert seen == [("a", 10), ("b", 20), ("c", 30)]


def test_looping_wraps_to_start():
    anim = Animation(["a", "b", "c"], [10, 20, 30], loop=True)
    for _ in range(3):
        anim.advance()
    assert anim.current_frame() == "a"
    assert anim.current_delay() == 10


def test_non_looping_stays_on_last_frame():
    anim = Animation(["a", "b", "c"], [10, 20, 30], loop=False)
    for _ in range(10):
        anim.advance()
    assert anim.current_frame() == "c"
    assert anim.current_delay() == 30


def test_single_frame_loop_stays_put():
    anim = Animation(["only"], [50])
    anim.advance()
    anim.advance()
    assert anim.current_frame() == "only"
    assert anim.current_delay() == 50


def test_loop_cycle_is_periodic():
    frames = ["a", "b", "c", "d"]
    anim = Animation(frames, [1, 2, 3, 4])
    first_pass = []
    second_pass = []
    for _ in frames:
        first_pass.append(anim.current_frame())
        anim.advance()
    for _ in frames:
        second_pass.append(anim.current_frame())
        anim.advance()
    assert first_pass == frames
    assert second_pass == frames


def test_length_is_frame_count():
    assert len(Animation(["a", "b"], [1, 2])) == 2


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        Animation([], [])


def test_mismatched_delays_rejected():
    with pytest.raises(ValueError):
        Animation(["a", "b"], [10])