"""
Testing the single-round state machine.
"""

import random

import pytest

from wordle_engine.exceptions import IncompleteGuess, WordNotInDictionary
from wordle_engine.models.game import GameOutcome, LetterStatus
from wordle_engine.services.dictionary import Dictionary
from wordle_engine.services.game_engine import GameEngine


def type_word(engine, word):
    for ch in word:
        engine.enter_letter(ch)


def play(engine, word):
    type_word(engine, word)
    return engine.submit_guess()


@pytest.fixture
def engine(dictionary):
    return GameEngine(dictionary, secret_word="SWORD")


def test_initial_state(engine):
    assert engine.outcome is GameOutcome.IN_PROGRESS
    assert engine.guesses == ()
    assert engine.current_input == ""
    assert dict(engine.keyboard) == {}
    assert engine.remaining_guesses == 6


def test_secret_is_drawn_from_dictionary():
    dictionary = Dictionary(["APPLE", "HOUSE", "TIGER"], rng=random.Random(3))
    engine = GameEngine(dictionary)
    assert engine.secret_word in {"APPLE", "HOUSE", "TIGER"}


def test_engine_without_dictionary_uses_fallback_word():
    engine = GameEngine()
    assert engine.secret_word == "SWORD"
    assert play(engine, "SWORD").is_win


def test_invalid_secret_word_is_rejected():
    with pytest.raises(ValueError):
        GameEngine(secret_word="SWORDS")
    with pytest.raises(ValueError):
        GameEngine(secret_word="SW0RD")


def test_winning_guess(engine):
    guess = play(engine, "SWORD")
    assert [l.status for l in guess] == [LetterStatus.CORRECT] * 5
    assert engine.outcome is GameOutcome.WON
    assert engine.state.answer == "SWORD"


def test_doors_against_sword(engine):
    guess = play(engine, "DOORS")
    assert [l.status for l in guess] == [
        LetterStatus.PRESENT, LetterStatus.ABSENT, LetterStatus.CORRECT,
        LetterStatus.CORRECT, LetterStatus.PRESENT,
    ]
    assert engine.outcome is GameOutcome.IN_PROGRESS
    assert engine.current_input == ""
    assert len(engine.guesses) == 1


def test_six_misses_lose(engine):
    for word in ["APPLE", "HOUSE", "PIANO", "TIGER", "CRANE", "STONE"]:
        assert engine.outcome is GameOutcome.IN_PROGRESS
        play(engine, word)
    assert engine.outcome is GameOutcome.LOST
    assert len(engine.guesses) == 6
    assert engine.remaining_guesses == 0
    assert engine.state.answer == "SWORD"


def test_win_on_last_attempt(engine):
    for word in ["APPLE", "HOUSE", "PIANO", "TIGER", "CRANE"]:
        play(engine, word)
    play(engine, "SWORD")
    assert engine.outcome is GameOutcome.WON


def test_win_before_attempts_run_out(dictionary):
    engine = GameEngine(dictionary, max_guesses=3, secret_word="SWORD")
    play(engine, "APPLE")
    play(engine, "SWORD")
    assert engine.outcome is GameOutcome.WON
    assert engine.remaining_guesses == 1


def test_enter_letter_stops_at_word_length(engine):
    results = [engine.enter_letter(ch) for ch in "ABCDEF"]
    assert results == [True] * 5 + [False]
    assert engine.current_input == "ABCDE"


def test_enter_letter_uppercases_and_ignores_non_letters(engine):
    assert engine.enter_letter("s")
    assert not engine.enter_letter("1")
    assert not engine.enter_letter("AB")
    assert not engine.enter_letter("")
    assert not engine.enter_letter("é")
    assert engine.current_input == "S"


def test_delete_letter_on_empty_input_is_noop(engine):
    assert engine.delete_letter() is False
    assert engine.current_input == ""


def test_delete_letter_removes_last(engine):
    type_word(engine, "SWO")
    assert engine.delete_letter()
    assert engine.current_input == "SW"


def test_incomplete_guess_leaves_state_unchanged(engine):
    play(engine, "DOORS")
    type_word(engine, "SWO")
    before = engine.state

    with pytest.raises(IncompleteGuess):
        engine.submit_guess()

    assert engine.state == before
    assert engine.current_input == "SWO"


def test_dictionary_validation_is_off_by_default(engine):
    guess = play(engine, "ZZZZZ")
    assert guess.word == "ZZZZZ"


def test_unknown_word_rejected_when_validating(dictionary):
    engine = GameEngine(dictionary, validate_words=True, secret_word="SWORD")
    type_word(engine, "ZZZZZ")

    with pytest.raises(WordNotInDictionary):
        engine.submit_guess()

    assert engine.current_input == "ZZZZZ"
    assert engine.guesses == ()
    assert dict(engine.keyboard) == {}


def test_validation_is_case_insensitive(dictionary):
    engine = GameEngine(dictionary, validate_words=True, secret_word="SWORD")
    assert play(engine, "doors").word == "DOORS"


def test_input_is_ignored_after_game_over(engine):
    play(engine, "SWORD")
    before = engine.state

    assert engine.enter_letter("A") is False
    assert engine.delete_letter() is False
    assert engine.submit_guess() is None
    assert engine.state == before


def test_input_buffer_frozen_after_loss(dictionary):
    engine = GameEngine(dictionary, max_guesses=1, secret_word="SWORD")
    play(engine, "APPLE")
    assert engine.outcome is GameOutcome.LOST
    assert engine.enter_letter("S") is False
    assert engine.current_input == ""


def test_keyboard_keeps_correct_after_present(engine):
    play(engine, "STONE")
    assert engine.keyboard["S"] is LetterStatus.CORRECT
    play(engine, "DOORS")
    assert engine.keyboard["S"] is LetterStatus.CORRECT


def test_keyboard_never_regresses(engine):
    precedence = {}
    for word in ["GOOSE", "DOORS", "WORDS", "STONE", "CRANE"]:
        play(engine, word)
        for letter, status in engine.keyboard.items():
            assert status.precedence >= precedence.get(letter, 0)
            precedence[letter] = status.precedence
        assert LetterStatus.EMPTY not in engine.keyboard.values()


def test_keyboard_snapshot_is_read_only(engine):
    play(engine, "DOORS")
    keyboard = engine.keyboard
    with pytest.raises(TypeError):
        keyboard["Z"] = LetterStatus.CORRECT
    assert "Z" not in engine.keyboard


def test_answer_hidden_while_in_progress(engine):
    play(engine, "DOORS")
    assert engine.state.answer is None
    assert engine.state.to_dict()["answer"] is None


def test_state_to_dict(engine):
    play(engine, "DOORS")
    type_word(engine, "SW")
    data = engine.state.to_dict()

    assert data["current_round"] == 1
    assert data["current_input"] == "SW"
    assert data["guesses"] == ["DOORS"]
    assert data["guess_results"][0] == [
        ["D", "PRESENT"], ["O", "ABSENT"], ["O", "CORRECT"], ["R", "CORRECT"], ["S", "PRESENT"]
    ]
    assert data["keyboard"] == {"D": "PRESENT", "O": "CORRECT", "R": "CORRECT", "S": "PRESENT"}
    assert data["outcome"] == "IN_PROGRESS"
    assert data["game_over"] is False


def test_restart_resets_everything(dictionary):
    engine = GameEngine(dictionary, secret_word="SWORD")
    play(engine, "SWORD")
    type_word(engine, "AB")

    engine.restart()

    assert engine.outcome is GameOutcome.IN_PROGRESS
    assert engine.guesses == ()
    assert engine.current_input == ""
    assert dict(engine.keyboard) == {}
    assert engine.secret_word in dictionary


def test_restart_can_pick_a_different_word():
    dictionary = Dictionary(["APPLE", "HOUSE", "TIGER", "PIANO", "CRANE"], rng=random.Random(0))
    engine = GameEngine(dictionary)
    seen = {engine.secret_word}
    for _ in range(30):
        engine.restart()
        seen.add(engine.secret_word)
    assert len(seen) > 1


def test_restart_with_explicit_word(engine):
    play(engine, "DOORS")
    engine.restart(secret_word="crane")
    assert engine.secret_word == "CRANE"
    assert engine.guesses == ()
