from word_learner.models.game import GameStatus, GuessOutcome, LetterResult
from word_learner.services.evaluator import evaluate_guess
from word_learner.services.reveal import build_reveal_schedule, schedule_to_dicts


def _outcome(guess, secret):
    results, key_updates = evaluate_guess(guess, secret)
    return GuessOutcome(guess=guess, results=results, key_updates=key_updates)


def test_tiles_flip_in_turn_and_color_halfway():
    steps = build_reveal_schedule(_outcome("ALLEY", "APPLE"), GameStatus.ENTERING)
    flips = [step for step in steps if step.action == "flip"]
    colors = [step for step in steps if step.action == "color"]

    assert [step.delay_ms for step in flips] == [0, 200, 400, 600, 800]
    assert [step.tile for step in flips] == [0, 1, 2, 3, 4]
    assert [step.delay_ms for step in colors] == [300, 500, 700, 900, 1100]
    assert [step.result for step in colors] == ["CORRECT", "PRESENT", "ABSENT", "PRESENT", "ABSENT"]


def test_finish_step_comes_last():
    steps = build_reveal_schedule(_outcome("CRANE", "CRANE"), GameStatus.WON)
    finish = steps[-1]
    assert finish.action == "finish"
    assert finish.delay_ms == 5 * 200 + 600
    assert finish.status == "WON"
    assert finish.key_updates == {letter: "CORRECT" for letter in "CRANE"}
    assert [step.delay_ms for step in steps] == sorted(step.delay_ms for step in steps)


def test_schedule_scales_with_word_length():
    steps = build_reveal_schedule(_outcome("ELEPHANT", "MOUNTAIN"), GameStatus.ENTERING)
    assert len(steps) == 8 * 2 + 1
    assert steps[-1].delay_ms == 8 * 200 + 600


def test_custom_timings():
    outcome = GuessOutcome(guess="AB", results=[LetterResult.ABSENT] * 2, key_updates={})
    steps = build_reveal_schedule(outcome, GameStatus.LOST, stagger_ms=10, half_ms=5, duration_ms=20)
    assert [(step.action, step.delay_ms) for step in steps] == [
        ("flip", 0), ("color", 5), ("flip", 10), ("color", 15), ("finish", 40)
    ]


def test_schedule_serializes_to_dicts():
    data = schedule_to_dicts(build_reveal_schedule(_outcome("CRANE", "CRANE"), GameStatus.WON))
    assert data[0] == {
        "delay_ms": 0, "action": "flip", "tile": 0, "result": None, "key_updates": {}, "status": None
    }
