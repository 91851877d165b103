"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import logging

import pytest

from delve.__main__ import _parse_seed, main


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = main(list(argv))
    return code, capsys.readouterr().out


class TestMain:
    def test_prints_rooms_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(
            capsys,
            "--width", "512",
            "--height", "512",
            "--min-room-width", "128",
            "--min-room-height", "128",
            "--seed", "42",
        )

        assert code == 0
        rooms = json.loads(out)
        assert rooms[0]["room"] == {"x": 0, "y": 0, "width": 512, "height": 512}
        assert len(rooms[0]["doors"]) == 1
        assert all(set(room) == {"room", "doors"} for room in rooms)

    def test_same_seed_same_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        _, first = _run(capsys, "--seed", "dungeon1")
        _, second = _run(capsys, "--seed", "dungeon1")
        assert first == second

    def test_ascii_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(capsys, "--width", "512", "--height", "256", "--ascii", "--seed", "7")

        lines = out.splitlines()
        assert code == 0
        assert len(lines) == 6
        grid, blank, legend = lines[:4], lines[4], lines[5]
        assert all(len(line) == 8 for line in grid)
        assert any("#" in line for line in grid)
        assert blank == ""
        assert legend == "'.' Floor  '#' Wall  '+' Door"

    def test_invalid_parameters_exit_with_status_2(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            code, out = _run(capsys, "--width", "0")

        assert code == 2
        assert out == ""
        assert "Layout generation failed" in caplog.text


def test_parse_seed_keeps_numbers_numeric() -> None:
    assert _parse_seed("12") == 12
    assert _parse_seed("dungeon1") == "dungeon1"
