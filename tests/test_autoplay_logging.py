import logging

from examples.autoplay import GameResult, log_summary, play_game


def test_play_game_runs_to_game_over() -> None:
    result = play_game(3, max_ticks=200_000, press_rate=0.5)
    assert result.game_over
    assert result.pieces > 0
    assert result.ticks < 200_000


def test_play_game_respects_tick_limit() -> None:
    result = play_game(1, max_ticks=10, press_rate=0.0)
    assert result.ticks == 10
    assert not result.game_over
    assert result.pieces == 0


def test_log_summary_reports_longest_game(caplog):
    results = [
        GameResult(seed=1, ticks=100, pieces=4, game_over=True),
        GameResult(seed=2, ticks=300, pieces=9, game_over=True),
    ]
    with caplog.at_level(logging.INFO, logger="examples.autoplay"):
        message = log_summary(results, index=2)

    assert "games=2" in message
    assert "seed 2 (9 pieces)" in caplog.text
    assert "After game 2" in caplog.text


def test_log_summary_without_games(caplog):
    with caplog.at_level(logging.INFO, logger="examples.autoplay"):
        message = log_summary([], index=0)
    assert message == "No games played."
