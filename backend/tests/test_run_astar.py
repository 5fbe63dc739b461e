import pytest

import run_astar


def test_prints_both_paths(capsys):
    run_astar.main(["--size", "5", "--seed", "3"])
    out = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in out] == ["index", "hash"]
    assert out[0].split(":", 1)[1] == out[1].split(":", 1)[1]


@pytest.mark.parametrize("argv", [["--size", "0"], ["--size", "-3"], ["--seed", "-1"]])
def test_bad_arguments_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        run_astar.main(argv)
    assert exc.value.code == 2
    assert "must be" in capsys.readouterr().err
