import pytest

from backend.algorithms.bench import AStarBench, STRATEGIES


def test_bench_runs_every_strategy():
    results = AStarBench(nsize=6, iterations=3, seed=5).run()
    assert [r.strategy for r in results] == list(STRATEGIES)
    for r in results:
        assert r.iterations == 3
        assert r.found == 3
        assert 0 < r.min_s <= r.mean_s <= r.max_s
        assert r.as_dict()["nsize"] == 6


def test_bench_rejects_bad_parameters():
    with pytest.raises(ValueError):
        AStarBench(nsize=0)
    with pytest.raises(ValueError):
        AStarBench(iterations=0)
    with pytest.raises(ValueError):
        AStarBench(nsize=4, iterations=1).run_strategy("heap")


@pytest.mark.parametrize("seed", [-1, 1.5, "x", True])
def test_bench_rejects_bad_seed(seed):
    with pytest.raises(ValueError):
        AStarBench(nsize=4, iterations=1, seed=seed)
