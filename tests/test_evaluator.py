from collections import Counter
from itertools import islice, product

import pytest

from word_learner.models.game import LetterResult
from word_learner.services.evaluator import evaluate_guess, merge_key_status
from word_learner.services.word_source import get_word_list

C, P, A = LetterResult.CORRECT, LetterResult.PRESENT, LetterResult.ABSENT


def test_exact_guess_is_all_correct():
    results, key_updates = evaluate_guess("CRANE", "CRANE")
    assert results == [C] * 5
    assert set(key_updates.values()) == {C}


def test_apple_alley():
    results, key_updates = evaluate_guess("ALLEY", "APPLE")
    assert results == [C, P, A, P, A]
    assert key_updates == {"A": C, "L": P, "E": P, "Y": A}


def test_single_occurrence_is_credited_once():
    # PLANT has one P; PAPER has two, the first aligned
    results, key_updates = evaluate_guess("PAPER", "PLANT")
    assert results == [C, P, A, A, A]
    assert key_updates["P"] == C


def test_earlier_absent_does_not_hide_later_correct():
    results, key_updates = evaluate_guess("EERIE", "STORE")
    assert results == [A, A, P, A, C]
    assert key_updates["E"] == C
    assert key_updates["R"] == P


def test_present_is_not_downgraded_within_a_guess():
    results, key_updates = evaluate_guess("LOLLY", "ALLOT")
    assert results == [P, P, C, A, A]
    assert key_updates["L"] == C
    assert key_updates["O"] == P


def test_length_mismatch_is_rejected():
    with pytest.raises(ValueError):
        evaluate_guess("CAT", "CRANE")


def test_results_never_overcount_secret_letters():
    words = get_word_list("en", 5)
    for guess, secret in islice(product(words, words), 200):
        results, _ = evaluate_guess(guess, secret)
        assert len(results) == len(secret)
        assert all(isinstance(result, LetterResult) for result in results)

        credited = Counter(letter for letter, result in zip(guess, results) if result != A)
        available = Counter(secret)
        for letter, count in credited.items():
            assert count <= available[letter]


def test_merge_never_downgrades():
    status = merge_key_status({}, {"A": C, "B": P})
    status = merge_key_status(status, {"A": A, "B": A, "C": A})
    status = merge_key_status(status, {"A": P, "C": P})
    assert status == {"A": C, "B": P, "C": P}


def test_merge_does_not_mutate_current():
    current = {"A": A}
    merge_key_status(current, {"A": C})
    assert current == {"A": A}
