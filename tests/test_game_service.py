from dataclasses import asdict

from greek_wordle.config.game_settings import DELETE_KEY, ENTER_KEY, MAX_GUESSES, WORD_LENGTH
from greek_wordle.services.game_service import get_game_service


def test_fixture_installs_global_service(game_service):
    assert get_game_service() is game_service


def test_new_game_state_hides_answer(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    assert state.game_id == game_id
    assert state.answer is None
    assert state.status == "in_progress"
    assert state.max_guesses == MAX_GUESSES
    assert state.word_length == WORD_LENGTH
    assert len(state.grid) == MAX_GUESSES
    assert state.grid[0][0] == {"letter": "", "status": "empty"}
    assert state.letter_status == {}
    assert "secret" not in asdict(state)


def test_unknown_game(game_service):
    assert game_service.get_game_state("nope") is None
    assert game_service.press_key("nope", "Α") is None
    assert game_service.is_valid_guess("nope", "ΛΟΓΟΣ") == (False, "Game not found")
    assert game_service.delete_game("nope") is False


def test_keys_build_current_guess(game_service):
    game_id = game_service.create_new_game()
    for key in "ΛΟΓ":
        game_service.press_key(game_id, key)
    game_service.press_key(game_id, DELETE_KEY)

    assert game_service.get_game_state(game_id).current_guess == "ΛΟ"


def test_short_submit_shakes(game_service, clock):
    game_id = game_service.create_new_game()
    result = game_service.press_key(game_id, ENTER_KEY)

    assert result.shake
    assert game_service.is_shaking(game_id)
    clock.advance(1)
    assert not game_service.is_shaking(game_id)


def test_is_valid_guess(game_service):
    game_id = game_service.create_new_game()

    assert game_service.is_valid_guess(game_id, "λογος") == (True, "")
    assert game_service.is_valid_guess(game_id, "ΛΟΓ")[0] is False
    assert game_service.is_valid_guess(game_id, "LOGOS") == (False, "Guess must contain only Greek letters")
    assert game_service.is_valid_guess(game_id, None)[0] is False


def test_make_guess_replaces_typed_letters(game_service):
    game_id = game_service.create_new_game()
    game_service.press_key(game_id, "Ω")

    result = game_service.make_guess(game_id, "ΛΟΓΟΣ")
    state = game_service.get_game_state(game_id)

    assert result.accepted
    assert "".join(tile["letter"] for tile in state.grid[0]) == "ΛΟΓΟΣ"
    assert [tile["status"] for tile in state.grid[0]] == ["present", "absent", "absent", "correct", "correct"]
    assert state.letter_status["Λ"] == "present"
    assert state.current_row == 1


def test_winning_reveals_answer(game_service):
    game_id = game_service.create_new_game()
    game_service.make_guess(game_id, "ΚΑΛΟΣ")
    state = game_service.get_game_state(game_id)

    assert state.won and state.game_over
    assert state.status == "won"
    assert state.answer == "ΚΑΛΟΣ"
    assert game_service.make_guess(game_id, "ΚΑΛΟΣ") is None
    assert game_service.is_valid_guess(game_id, "ΚΑΛΟΣ") == (False, "Game is already over")


def test_losing_reveals_answer(game_service):
    game_id = game_service.create_new_game()
    for _ in range(MAX_GUESSES):
        game_service.make_guess(game_id, "ΣΠΙΤΙ")
    state = game_service.get_game_state(game_id)

    assert state.game_over and not state.won
    assert state.status == "lost"
    assert state.answer == "ΚΑΛΟΣ"


def test_delete_game(game_service):
    game_id = game_service.create_new_game()

    assert game_service.delete_game(game_id) is True
    assert game_service.get_game_state(game_id) is None


def test_cleanup_removes_only_idle_games(game_service, clock):
    idle_id = game_service.create_new_game()
    clock.advance(100)
    active_id = game_service.create_new_game()
    clock.advance(50)
    game_service.press_key(active_id, "Α")
    clock.advance(60)

    result = game_service.cleanup_stale_games(max_idle_seconds=120)

    assert result == {"cleaned_count": 1, "removed_game_ids": [idle_id]}
    assert idle_id not in game_service.games
    assert active_id in game_service.games


def test_make_guess_for_game_removed_after_validation(game_service, monkeypatch):
    game_id = game_service.create_new_game()
    monkeypatch.setattr(game_service, 'is_valid_guess', lambda *args: (True, ""))
    game_service.cleanup_stale_games(max_idle_seconds=-1)

    assert game_id not in game_service.games
    assert game_service.make_guess(game_id, "ΛΟΓΟΣ") is None
