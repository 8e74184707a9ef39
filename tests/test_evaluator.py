import pytest

from latin_wordle.models import GuessLengthError, LetterStatus
from latin_wordle.services.evaluator import evaluate_guess, is_winning_evaluation, summarize_letter_status

C = LetterStatus.CORRECT
M = LetterStatus.MISPLACED
I = LetterStatus.INCORRECT


def statuses(guess, answer):
    return [status for _, status in evaluate_guess(guess, answer)]


def test_duplicate_guess_letters_against_single_answer_letters():
    result = evaluate_guess("LLAMA", "LEARN")
    assert result == [("L", C), ("L", I), ("A", C), ("M", I), ("A", I)]
    # the only A in the answer is used up by the exact match
    assert all(status is not M for letter, status in result if letter == "A")


def test_perfect_guess_is_all_correct():
    for word in ["TERRA", "LUPUS", "MOTUM", "AMICA"]:
        assert statuses(word, word) == [C] * 5


def test_disjoint_guess_is_all_incorrect():
    assert statuses("LUPUS", "AMICA") == [I] * 5


@pytest.mark.parametrize("guess, answer", [
    ("SILVA", "LITUS"),
    ("PORTA", "DOLUS"),
    ("VIRGO", "AMICE"),
    ("CAUSE", "DOMUS"),
])
def test_unique_letters_follow_position_then_membership(guess, answer):
    for i, (letter, status) in enumerate(evaluate_guess(guess, answer)):
        if letter == answer[i]:
            assert status is C
        elif letter in answer:
            assert status is M
        else:
            assert status is I


def test_exact_matches_are_resolved_before_misplaced():
    # LUPUS has two Us, both matched in place, so no U is left over
    assert statuses("UUUUU", "LUPUS") == [I, C, I, C, I]
    assert statuses("SSSSS", "LUPUS") == [I, I, I, I, C]


def test_repeated_answer_letters_are_each_available_once():
    assert statuses("ERROR", "TERRA") == [M, M, C, I, I]


def test_misplaced_scan_runs_left_to_right():
    # one spare A in the answer: the leftmost non-exact A gets it
    assert statuses("AABCD", "EFGHA") == [M, I, I, I, I]


def test_misplaced_count_never_exceeds_remaining_occurrences():
    guess, answer = "RRRRE", "TERRA"
    result = evaluate_guess(guess, answer)
    marked = sum(1 for letter, status in result if letter == "R" and status in (C, M))
    assert marked == answer.count("R")


def test_result_keeps_guess_letters_in_order():
    assert [letter for letter, _ in evaluate_guess("MOTUM", "VOTUM")] == list("MOTUM")


def test_length_mismatch_is_rejected():
    with pytest.raises(GuessLengthError):
        evaluate_guess("TERR", "TERRA")
    with pytest.raises(ValueError):
        evaluate_guess("TERRAE", "TERRA")


def test_is_winning_evaluation():
    assert is_winning_evaluation(evaluate_guess("TERRA", "TERRA"))
    assert not is_winning_evaluation(evaluate_guess("TERRE", "TERRA"))


def test_letter_summary_only_improves():
    history = [
        evaluate_guess("LUPUS", "TERRA"),
        evaluate_guess("ARTEM", "TERRA"),
        evaluate_guess("TERRA", "TERRA"),
    ]
    summary = summarize_letter_status(history)
    assert summary["L"] is I
    assert summary["T"] is C
    assert summary["A"] is C
    assert summary["M"] is I

    # a later, worse result for A does not downgrade it
    summary = summarize_letter_status(history + [evaluate_guess("AAAAA", "TERRA")])
    assert summary["A"] is C
