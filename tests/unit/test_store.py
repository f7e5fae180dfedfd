import pytest

from grid_arcade.store import InMemoryScoreStore, record_best_score


def test_first_score_is_recorded() -> None:
    store = InMemoryScoreStore()
    assert store.get("snakeHighScore") is None
    assert record_best_score(store, "snakeHighScore", 0)
    assert store.get("snakeHighScore") == 0


@pytest.mark.parametrize("score, written, best", [(40, False, 50), (50, False, 50), (60, True, 60)])
def test_only_strictly_higher_scores_replace_best(score: int, written: bool, best: int) -> None:
    store = InMemoryScoreStore({"tetrisHighScore": 50})
    assert record_best_score(store, "tetrisHighScore", score) is written
    assert store.get("tetrisHighScore") == best


def test_keys_are_independent() -> None:
    store = InMemoryScoreStore({"snakeHighScore": 10})
    record_best_score(store, "tetrisHighScore", 5)
    assert store.get("snakeHighScore") == 10
    assert store.get("tetrisHighScore") == 5
