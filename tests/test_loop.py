from __future__ import annotations

import pytest

from fruitrush.game.loop import FixedStepLoop


@pytest.fixture()
def steps() -> list[float]:
    return []


@pytest.fixture()
def loop(steps: list[float]) -> FixedStepLoop:
    return FixedStepLoop(step=steps.append, frame_ms=10, max_delta_ms=100)


def test_first_frame_only_anchors(loop: FixedStepLoop, steps: list[float]) -> None:
    assert loop.on_frame(1000) is False
    assert steps == []


def test_waits_for_full_interval(loop: FixedStepLoop, steps: list[float]) -> None:
    loop.on_frame(0)
    assert loop.on_frame(9) is False
    assert loop.on_frame(10) is True
    assert steps == [10]
    assert loop.tick_count == 1


def test_remainder_carries_over(loop: FixedStepLoop, steps: list[float]) -> None:
    loop.on_frame(0)
    loop.on_frame(25)
    # Base moves to 20, so 30 is a full interval later
    assert loop.on_frame(29) is False
    assert loop.on_frame(30) is True
    assert steps == [25, 10]


def test_one_step_per_callback_with_clamped_delta(loop: FixedStepLoop, steps: list[float]) -> None:
    loop.on_frame(0)
    assert loop.on_frame(5000) is True
    assert steps == [100]
    assert loop.tick_count == 1


def test_backwards_clock_reanchors(loop: FixedStepLoop, steps: list[float]) -> None:
    loop.on_frame(500)
    assert loop.on_frame(100) is False
    assert loop.on_frame(110) is True
    assert steps == [10]


def test_reset_forgets_time_base(loop: FixedStepLoop, steps: list[float]) -> None:
    loop.on_frame(0)
    loop.reset()
    assert loop.on_frame(50) is False
    assert steps == []


def test_render_follows_each_step() -> None:
    calls: list[str] = []
    loop = FixedStepLoop(step=lambda d: calls.append("step"), render=lambda: calls.append("render"), frame_ms=10)
    loop.on_frame(0)
    loop.on_frame(5)
    loop.on_frame(12)
    assert calls == ["step", "render"]


@pytest.mark.parametrize("frame_ms", [0, -1])
def test_rejects_non_positive_interval(frame_ms: float) -> None:
    with pytest.raises(ValueError):
        FixedStepLoop(step=lambda d: None, frame_ms=frame_ms)
