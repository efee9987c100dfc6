import pytest
from pydantic import ValidationError

from tictactoe import main as main_module
from tictactoe.board import Mark
from tictactoe.config import GameSettings, TicTacToeConfig, get_config, reset_config
from tictactoe.game import TicTacToeGame


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    reset_config()
    monkeypatch.setattr(main_module, "setup_logging", lambda level=None: None)
    yield
    reset_config()


def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_two_player_game_to_the_end(monkeypatch, capsys):
    feed(monkeypatch, ["1", "4", "2", "5", "3", "n"])

    assert main_module.main(["--two-player", "--turn-seconds", "60"]) == 0

    out = capsys.readouterr().out
    assert "Winner: X (cells 1, 2, 3)" in out
    assert "Goodbye!" in out


def test_bad_input_is_reported(monkeypatch, capsys):
    feed(monkeypatch, ["hello", "10", "5", "5", "q"])

    main_module.main(["--two-player", "--turn-seconds", "60"])

    out = capsys.readouterr().out
    assert "Enter a cell number 1-9" in out
    assert "Invalid cell 10" in out
    assert "Cell 5 is already taken by X" in out


def test_computer_answers(monkeypatch, capsys):
    feed(monkeypatch, ["5", "q"])

    main_module.main(["--delay", "0", "--turn-seconds", "60"])

    out = capsys.readouterr().out
    assert "Computer is thinking..." in out
    assert "Computer plays 1" in out


def test_mode_toggle_and_restart(monkeypatch, capsys):
    feed(monkeypatch, ["m", "1", "r", "q"])

    main_module.main(["--delay", "0", "--turn-seconds", "60"])

    out = capsys.readouterr().out
    assert "Two player mode. New game!" in out
    assert "Computer plays" not in out


def test_interrupt_is_handled(monkeypatch, capsys):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)

    assert main_module.main(["--two-player"]) == 0
    assert "Game interrupted by user." in capsys.readouterr().out


def test_config_file_and_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"game": {"turn_seconds": 4}}')

    parser_args = main_module.argparse.Namespace(
        config=str(path), two_player=True, turn_seconds=None, delay=0.0, pruning=True
    )
    config = main_module.build_config(parser_args)

    assert config.game.turn_seconds == 4
    assert not config.game.single_player
    assert config.game.computer_delay == 0.0
    assert config.engine.use_pruning


def overrides(**kwargs):
    values = dict(config=None, two_player=False, turn_seconds=None, delay=None, pruning=False)
    values.update(kwargs)
    return main_module.argparse.Namespace(**values)


@pytest.mark.parametrize("kwargs", [{"turn_seconds": 0}, {"delay": -1.0}])
def test_out_of_range_overrides_rejected(kwargs):
    with pytest.raises(ValidationError):
        main_module.build_config(overrides(**kwargs))


@pytest.mark.parametrize("argv", [["--delay", "-1"], ["--turn-seconds", "0"]])
def test_out_of_range_options_exit_with_usage_error(monkeypatch, capsys, argv):
    feed(monkeypatch, [])

    with pytest.raises(SystemExit) as exc:
        main_module.main(argv)

    assert exc.value.code == 2
    assert "invalid option" in capsys.readouterr().err


def test_overrides_leave_global_config_alone():
    config = main_module.build_config(overrides(two_player=True, turn_seconds=3))

    assert config.game.turn_seconds == 3
    assert not config.game.single_player
    assert get_config().game.turn_seconds == 10
    assert get_config().game.single_player


def test_slow_answer_loses_the_turn(monkeypatch, capsys):
    # First prompt takes 30 seconds, the next one none
    readings = iter([0.0, 30.0, 30.0, 30.0])
    feed(monkeypatch, ["5", "q"])

    config = TicTacToeConfig(game=GameSettings(turn_seconds=10, computer_delay=0, single_player=True))
    game = TicTacToeGame(config)
    main_module.ConsoleGame(game, delay=0, clock=lambda: next(readings)).run()

    out = capsys.readouterr().out
    assert "Time's up! O moves instead." in out
    assert "Computer plays 1" in out

    board = game.game_state.board
    assert board[4] is Mark.EMPTY
    assert board[0] is Mark.O
    assert game.game_state.current_player is Mark.X
