from dodgeball.states import AppState, GameState, StateMachine


def test_initial_state():
    machine = StateMachine()
    assert machine.app is AppState.MAIN_MENU
    assert machine.game is GameState.COUNTDOWN
    assert machine.is_running() is False


def test_play_from_main_menu_enters_countdown():
    machine = StateMachine()
    assert machine.on_play_clicked() is True
    assert machine.app is AppState.IN_GAME
    assert machine.game is GameState.COUNTDOWN


def test_play_ignored_while_in_game():
    machine = StateMachine()
    machine.on_play_clicked()
    machine.start_running()
    assert machine.on_play_clicked() is False
    assert machine.game is GameState.RUNNING


def test_toggle_pause_cycle():
    machine = StateMachine()
    machine.on_play_clicked()
    machine.start_running()
    assert machine.is_running() is True
    assert machine.toggle_pause() is True
    assert machine.game is GameState.PAUSED
    assert machine.is_running() is False
    assert machine.toggle_pause() is True
    assert machine.game is GameState.RUNNING


def test_toggle_pause_ignored_during_countdown():
    machine = StateMachine()
    machine.on_play_clicked()
    assert machine.toggle_pause() is False
    assert machine.game is GameState.COUNTDOWN


def test_toggle_pause_ignored_outside_game():
    machine = StateMachine()
    assert machine.toggle_pause() is False
    assert machine.app is AppState.MAIN_MENU


def test_resume_only_when_paused():
    machine = StateMachine()
    machine.on_play_clicked()
    machine.start_running()
    assert machine.on_resume_clicked() is False
    machine.toggle_pause()
    assert machine.on_resume_clicked() is True
    assert machine.game is GameState.RUNNING


def test_death_leads_to_game_over_and_replay():
    machine = StateMachine()
    assert machine.on_player_death() is False
    machine.on_play_clicked()
    machine.start_running()
    assert machine.on_player_death() is True
    assert machine.app is AppState.GAME_OVER
    assert machine.on_play_clicked() is True
    assert machine.app is AppState.IN_GAME
    assert machine.game is GameState.COUNTDOWN