import itertools
from pathlib import Path
from unittest import mock

import pygame
import pytest

from fighter_anim.animation import Action
from fighter_anim.roster import get_character
from fighter_anim.sprites import SMALL_CELL
from fighter_anim.viewer import action_for_key, main, run_viewer


@pytest.fixture(autouse=True)
def _headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _scripted_events(first, quit_after=20):
    calls = itertools.count()

    def get(*args, **kwargs):
        n = next(calls)
        if n == 0:
            return list(first)
        if n >= quit_after:
            return [pygame.event.Event(pygame.QUIT)]
        return []

    return get


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_1, Action.ATTACK_1),
        (pygame.K_2, Action.ATTACK_2),
        (pygame.K_3, Action.ATTACK_3),
    ],
)
def test_number_keys_start_attacks(key, expected):
    assert action_for_key(key) is expected


@pytest.mark.parametrize("key", [pygame.K_0, pygame.K_4, pygame.K_a, pygame.K_SPACE])
def test_other_keys_do_nothing(key):
    assert action_for_key(key) is None


def test_key_press_plays_attack_then_rests(tmp_path):
    press = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_2)
    with mock.patch("pygame.image.load", return_value=pygame.Surface(SMALL_CELL)), \
            mock.patch("pygame.event.get", side_effect=_scripted_events([press])), \
            mock.patch("pygame.time.get_ticks", side_effect=itertools.count(0, 100)), \
            mock.patch("pygame.time.delay"):
        shown = run_viewer("archer", tmp_path)
    assert shown[0] == (Action.ATTACK_2, 0)
    assert shown[-1] == (Action.REST, 0)
    attack_frames = [f for f in shown if f[0] is Action.ATTACK_2]
    assert attack_frames == [(Action.ATTACK_2, i) for i in range(3)]


def test_without_key_fighter_stays_at_rest(tmp_path):
    with mock.patch("pygame.image.load", return_value=pygame.Surface(SMALL_CELL)), \
            mock.patch("pygame.event.get", side_effect=_scripted_events([], 5)), \
            mock.patch("pygame.time.get_ticks", side_effect=itertools.count(0, 100)), \
            mock.patch("pygame.time.delay"):
        shown = run_viewer("naruto", tmp_path)
    assert shown == [(Action.REST, 0)]


def test_loads_every_image_of_character(tmp_path):
    loader = mock.Mock(return_value=pygame.Surface(SMALL_CELL))
    with mock.patch("pygame.image.load", loader), \
            mock.patch("pygame.event.get", side_effect=_scripted_events([], 1)), \
            mock.patch("pygame.time.get_ticks", side_effect=itertools.count(0, 100)), \
            mock.patch("pygame.time.delay"):
        run_viewer("sonic", tmp_path)
    loaded = [Path(c.args[0]).name for c in loader.call_args_list]
    assert loaded == get_character("sonic").image_paths()
    assert all(Path(c.args[0]).parent == tmp_path for c in loader.call_args_list)


def test_main_reports_missing_images(tmp_path, capsys):
    assert main(["guerrier", "-d", str(tmp_path)]) == 1
    assert "guerrier_sel.jpeg" in capsys.readouterr().err


def test_main_rejects_unknown_character():
    with pytest.raises(SystemExit) as info:
        main(["nobody"])
    assert info.value.code == 2