"""
Test Suite: Command Line
========================
Headless runs and argument validation.
"""

import sys

import pytest

import main
from flocking import FlockParams


class TestHeadless:

    def test_summary(self):
        params = FlockParams.from_config(count=20)
        summary = main.run_headless(params, seed=3, frames=50)
        assert summary["frames"] == 50
        assert summary["boids"] == 20
        assert params.min_speed <= summary["mean_speed"] <= params.max_speed

    def test_empty_flock(self):
        summary = main.run_headless(FlockParams.from_config(count=0), seed=1, frames=3)
        assert summary["boids"] == 0
        assert summary["mean_speed"] == 0.0

    def test_cli_headless(self, capsys):
        assert main.main(["--headless", "10", "--seed", "4", "--count", "12"]) == 0
        out = capsys.readouterr().out
        assert "Frames:      10" in out
        assert "Boids:       12" in out

    def test_cli_synchronous(self, capsys):
        assert main.main(["--headless", "5", "--update-mode", "synchronous"]) == 0


class TestArguments:

    def test_invalid_count(self):
        assert main.main(["--headless", "1", "--count", "-1"]) == 2

    def test_unknown_update_mode(self):
        with pytest.raises(SystemExit):
            main.main(["--update-mode", "shuffled"])

    def test_missing_rendering_libraries(self, monkeypatch, caplog):
        monkeypatch.setitem(sys.modules, "core.application", None)
        assert main.main(["--count", "3"]) == 1
        assert "Rendering libraries unavailable" in caplog.text

    def test_display_failure_shuts_pygame_down(self, monkeypatch, caplog):
        pytest.importorskip("OpenGL.GL")
        import pygame

        def no_display(*args, **kwargs):
            raise pygame.error("No available video device")

        monkeypatch.setattr(pygame.display, "set_mode", no_display)
        assert main.main(["--count", "3"]) == 1
        assert "Could not open the display" in caplog.text
        assert not pygame.get_init()

    def test_programming_errors_are_not_reported_as_display_failures(self, monkeypatch):
        pytest.importorskip("OpenGL.GL")
        import core.application

        def broken(*args, **kwargs):
            raise TypeError("bad argument")

        monkeypatch.setattr(core.application.Application, "__init__", broken)
        with pytest.raises(TypeError):
            main.main(["--count", "3"])
