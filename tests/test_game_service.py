import threading

from word_learner.services.game_service import GameService


def _run_together(actions):
    barrier = threading.Barrier(len(actions))

    def run(action):
        barrier.wait()
        action()

    threads = [threading.Thread(target=run, args=(action,)) for action in actions]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_letters_are_all_kept():
    service = GameService()
    game_id = service.start_game("CRANE", "en")
    results = []

    _run_together([lambda letter=letter: results.append(service.add_letter(game_id, letter))
                   for letter in "CRANE"])

    assert all(accepted for accepted, _ in results)
    state = service.get_game_state(game_id)
    assert state.current_tile == 5
    assert sorted(state.board[0]) == sorted("CRANE")


def test_concurrent_letters_never_overfill_a_row():
    service = GameService()
    game_id = service.start_game("LUNA", "es")
    results = []

    _run_together([lambda: results.append(service.add_letter(game_id, "A")) for _ in range(12)])

    assert sum(accepted for accepted, _ in results) == 4
    assert service.get_game_state(game_id).current_tile == 4


def test_concurrent_guesses_each_take_a_row():
    service = GameService()
    game_id = service.start_game("CRANE", "en")
    results = []

    _run_together([lambda word=word: results.append(service.make_guess(game_id, word))
                   for word in ("TRAIN", "SLATE", "MOUSE")])

    assert all(outcome is not None for outcome, _ in results)
    state = service.get_game_state(game_id)
    assert state.current_row == 3
    assert sorted("".join(row) for row in state.board[:3]) == ["MOUSE", "SLATE", "TRAIN"]


def test_unknown_game():
    service = GameService()
    assert service.add_letter("nope", "A") is None
    assert service.delete_letter("nope") is None
    assert service.submit_guess("nope") is None
    assert service.make_guess("nope", "CRANE") is None


def test_refused_guess_leaves_session_untouched():
    service = GameService()
    game_id = service.start_game("CRANE", "en")
    before = service.get_session(game_id)

    outcome, state = service.make_guess(game_id, "CRAN")
    assert outcome is None
    assert service.get_session(game_id) is before
    assert state.current_row == 0
