"""
Tests for the game engine.

Tests:
- Key press transitions and their no-op cases
- Outcome evaluation (win checked before loss)
- Cell feedback colors and keyboard letter sets
- Score sharing
"""

import pytest

from daily_wordle.config.game_settings import CLEAR, EMPTY_CELL, ENTER
from daily_wordle.models.game import GameConfig, GameState, LetterStatus, Outcome, TransitionResult
from daily_wordle.services.game_engine import (
    GameNotWonError,
    InvalidKeyError,
    WordleEngine,
    apply_key,
    color_of,
    normalize_key,
    share_text,
)
from daily_wordle.services.notifications import NotificationKind


def guess(engine, word):
    """Type a word and press ENTER, returning the ENTER result."""
    for letter in word:
        engine.press(letter)
    return engine.press(ENTER)


class TestGameConfig:

    def test_word_is_lower_cased(self):
        config = GameConfig(word="RuSt")
        assert config.word == "rust"
        assert config.word_length == 4
        assert config.max_attempts == 6

    @pytest.mark.parametrize("word", ["", "ru5t", "two words", "çava", "İstanbul"])
    def test_rejects_bad_words(self, word):
        with pytest.raises(ValueError):
            GameConfig(word=word)

    def test_rejects_non_positive_attempts(self):
        with pytest.raises(ValueError):
            GameConfig(word="rust", max_attempts=0)

    def test_empty_state_has_one_row_per_attempt(self, rust_config):
        state = GameState.empty(rust_config)
        assert len(state.grid) == 6
        assert all(row == (EMPTY_CELL,) * 4 for row in state.grid)
        assert (state.row, state.col, state.outcome) == (0, 0, Outcome.PLAYING)


class TestKeyNormalization:

    @pytest.mark.parametrize("raw,expected", [
        ("a", "a"),
        ("Q", "q"),
        ("ENTER", ENTER),
        ("enter", ENTER),
        ("\n", ENTER),
        ("CLEAR", CLEAR),
        ("Backspace", CLEAR),
        ("\b", CLEAR),
    ])
    def test_accepted_keys(self, raw, expected):
        assert normalize_key(raw) == expected

    @pytest.mark.parametrize("raw", ["", "ab", "1", " ", None, 5, "é", "İ", "ß"])
    def test_rejected_keys(self, raw):
        with pytest.raises(InvalidKeyError):
            normalize_key(raw)

    def test_invalid_key_leaves_engine_untouched(self, engine):
        engine.press("r")
        before = engine.state

        with pytest.raises(ValueError):
            engine.press("7")

        assert engine.state is before


class TestTransitions:

    def test_letters_fill_the_active_row(self, engine):
        for letter in "ru":
            assert engine.press(letter) is TransitionResult.CONTINUED

        assert engine.state.grid[0] == ("r", "u", EMPTY_CELL, EMPTY_CELL)
        assert (engine.state.row, engine.state.col) == (0, 2)

    def test_upper_case_letters_are_stored_lower_case(self, engine):
        engine.press("R")
        assert engine.state.grid[0][0] == "r"

    @pytest.mark.parametrize("typed", ["", "r", "ru", "rus"])
    def test_enter_on_incomplete_row_is_a_no_op(self, engine, typed):
        for letter in typed:
            engine.press(letter)
        before = engine.state

        assert engine.press(ENTER) is TransitionResult.CONTINUED
        assert engine.state is before

    def test_clear_at_first_column_is_a_no_op(self, engine):
        before = engine.state

        engine.press(CLEAR)

        assert engine.state is before
        assert engine.state == GameState.empty(engine.config)

    def test_clear_removes_the_last_letter(self, engine):
        engine.press("r")
        engine.press("u")
        engine.press(CLEAR)

        assert engine.state.grid[0] == ("r", EMPTY_CELL, EMPTY_CELL, EMPTY_CELL)
        assert engine.state.col == 1

    def test_letter_on_full_row_is_ignored(self, engine):
        for letter in "rude":
            engine.press(letter)
        before = engine.state

        engine.press("x")

        assert engine.state is before
        assert engine.state.col == 4

    def test_enter_on_full_row_moves_to_next_row(self, engine):
        assert guess(engine, "rude") is TransitionResult.CONTINUED
        assert (engine.state.row, engine.state.col) == (1, 0)

    def test_any_letters_are_accepted_as_a_guess(self, engine):
        guess(engine, "zzzz")
        assert engine.state.row == 1

    def test_transition_does_not_alias_previous_state(self, rust_config):
        start = GameState.empty(rust_config)

        after, _ = apply_key(start, "r", rust_config)

        assert start.grid[0][0] == EMPTY_CELL
        assert after.grid[0][0] == "r"
        assert after.grid[1] is start.grid[1]


class TestOutcome:

    def test_rust_example(self, engine, notifications):
        assert guess(engine, "rude") is TransitionResult.CONTINUED
        assert engine.row_colors(0) == [
            LetterStatus.CORRECT, LetterStatus.CORRECT, LetterStatus.ABSENT, LetterStatus.ABSENT,
        ]
        assert engine.outcome is Outcome.PLAYING

        for letter in "rust":
            engine.press(letter)
        assert engine.outcome is Outcome.PLAYING

        assert engine.press(ENTER) is TransitionResult.WON
        assert engine.outcome is Outcome.WON
        assert all(color is LetterStatus.CORRECT for color in engine.row_colors(1))
        assert [n.kind for n in notifications] == [NotificationKind.WON]
        assert notifications[0].actions == ("share",)

    def test_exact_first_guess_wins_even_on_the_last_attempt(self, notifications):
        engine = WordleEngine(GameConfig(word="rust", max_attempts=1), notifier=notifications.append)

        assert guess(engine, "rust") is TransitionResult.WON

        assert engine.state.row == 1
        assert engine.outcome is Outcome.WON
        assert [n.kind for n in notifications] == [NotificationKind.WON]

    def test_correct_sixth_guess_wins(self, engine):
        for word in ["aaaa", "bbbb", "cccc", "dddd", "eeee"]:
            guess(engine, word)

        assert guess(engine, "rust") is TransitionResult.WON
        assert engine.outcome is Outcome.WON

    def test_loses_exactly_on_the_last_wrong_guess(self, engine, notifications):
        wrong = ["aaaa", "bbbb", "cccc", "dddd", "eeee", "ffff"]

        for word in wrong[:-1]:
            assert guess(engine, word) is TransitionResult.CONTINUED
            assert engine.outcome is Outcome.PLAYING
        assert notifications == []

        assert guess(engine, wrong[-1]) is TransitionResult.LOST
        assert engine.outcome is Outcome.LOST
        assert [n.kind for n in notifications] == [NotificationKind.LOST]
        assert "rust" in notifications[0].message

    def test_input_after_loss_is_ignored(self, engine, notifications):
        for word in ["aaaa", "bbbb", "cccc", "dddd", "eeee", "ffff"]:
            guess(engine, word)
        before = engine.state

        for key in ["r", CLEAR, ENTER]:
            assert engine.press(key) is TransitionResult.CONTINUED

        assert engine.state is before
        assert len(notifications) == 1

    def test_input_after_win_is_ignored(self, engine, notifications):
        guess(engine, "rust")
        before = engine.state

        assert guess(engine, "rust") is TransitionResult.CONTINUED

        assert engine.state is before
        assert len(notifications) == 1


class TestColors:

    def test_unset_exactly_for_unsubmitted_rows(self, engine):
        guess(engine, "rude")
        guess(engine, "stir")
        engine.press("t")

        for row in range(6):
            for col in range(4):
                color = engine.color_of(row, col)
                if row >= engine.state.row:
                    assert color is LetterStatus.UNSET
                else:
                    assert color is not LetterStatus.UNSET

    def test_present_for_misplaced_letters(self, engine):
        guess(engine, "tsur")
        assert engine.row_colors(0) == [LetterStatus.PRESENT] * 4

    def test_repeated_letters_are_not_demoted(self, engine):
        guess(engine, "ssss")
        assert engine.row_colors(0) == [
            LetterStatus.PRESENT, LetterStatus.PRESENT, LetterStatus.CORRECT, LetterStatus.PRESENT,
        ]

    def test_module_function_matches_engine(self, engine):
        guess(engine, "rude")
        assert color_of(engine.state, engine.config, 0, 1) is engine.color_of(0, 1)

    def test_keyboard_status(self, engine):
        guess(engine, "rude")
        guess(engine, "sort")

        status = engine.keyboard_status()

        assert status.correct == {"r", "u", "t"}
        assert status.present == {"s", "r"}
        assert status.absent == {"d", "e", "o"}
        assert status.to_dict()["correct"] == ["r", "t", "u"]

    def test_keyboard_status_ignores_typed_but_unsubmitted_letters(self, engine):
        engine.press("r")
        status = engine.keyboard_status()
        assert not (status.correct or status.present or status.absent)

    def test_active_cell_follows_the_cursor(self, engine):
        engine.press("r")
        assert engine.is_cell_active(0, 1)
        assert not engine.is_cell_active(0, 0)


class TestShareScore:

    def test_share_text_lists_submitted_rows(self, engine):
        guess(engine, "rude")
        guess(engine, "rust")

        assert engine.share_text() == "Wordle\n🟩🟩⬛⬛\n🟩🟩🟩🟩"

    def test_share_text_is_idempotent(self, engine):
        guess(engine, "tsur")
        guess(engine, "rust")

        assert share_text(engine.state, engine.config) == share_text(engine.state, engine.config)
        assert engine.share_score() == engine.share_score()

    def test_share_score_writes_clipboard_and_notifies(self, engine, notifications, clipboard):
        guess(engine, "rust")

        text = engine.share_score()

        assert clipboard == [text]
        assert notifications[-1].kind is NotificationKind.COPIED

    def test_share_before_win_is_refused(self, engine, clipboard):
        guess(engine, "rude")

        with pytest.raises(GameNotWonError):
            engine.share_score()
        assert clipboard == []
