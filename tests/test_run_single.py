import sys

import pytest
import yaml

from simulate import run_single


@pytest.fixture
def play(tmp_path, monkeypatch):
    def _play(status_cfg, inputs):
        path = tmp_path / "cfg.yaml"
        path.write_text(
            yaml.safe_dump({"sim": {"rng_seed": 1}, "status": status_cfg}), encoding="utf-8"
        )
        monkeypatch.setattr(sys, "argv", ["run_single", "--config", str(path)])
        answers = iter(inputs)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        run_single.main()
        return prompts

    return _play


def test_starting_at_max_hunger_ends_before_any_input(play, capsys):
    prompts = play({"hunger": 16}, ["3"])
    assert prompts == []
    assert "[game over]" in capsys.readouterr().out


def test_exit_ends_session(play, capsys):
    play({}, ["9", "7", "3"])
    out = capsys.readouterr().out
    assert "'9' is not a valid choice" in out
    assert "[game over]" not in out
    assert out.rstrip().endswith("Bye!")


def test_empty_tank_refuses_to_move(play, capsys):
    play({"gas": 0}, ["1"])
    assert "Out of gas" in capsys.readouterr().out
