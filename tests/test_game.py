import os
import shutil
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from hexmaze.game import TIME_PER_FRAME, WINDOW_SIZE, Game, main
from hexmaze.main_menu import MainMenu
from hexmaze.state import State

TEXTURE_NAMES = (
    "black_square.png",
    "food.png",
    "wall.png",
    "hexagon-16.png",
    "blue_hexagon.png",
    "purple_hexagon.png",
    "red_hexagon.png",
)


def _make_assets(root):
    textures = root / "assets" / "textures"
    textures.mkdir(parents=True)
    for name in TEXTURE_NAMES:
        surface = pygame.Surface((16, 16))
        surface.fill((10, 20, 30))
        pygame.image.save(surface, str(textures / name))
    fonts = root / "assets" / "fonts"
    fonts.mkdir(parents=True)
    default_font = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    shutil.copy(default_font, fonts / "Pacifico-Regular.ttf")


class _ClosingState(State):
    def __init__(self, window):
        self.window = window
        self.deltas = []

    def init(self):
        pass

    def process_input(self):
        pass

    def update(self, delta):
        self.deltas.append(delta)
        self.window.close()

    def draw(self):
        pass


@pytest.fixture(autouse=True)
def _shutdown_display():
    yield
    pygame.display.quit()


@pytest.fixture
def assets_dir(tmp_path, monkeypatch):
    _make_assets(tmp_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_run_updates_with_fixed_frame_time(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    game = Game()
    state = _ClosingState(game.context.window)
    game.context.states.add(state)
    game.run()
    assert state.deltas == [pytest.approx(1 / 60)]
    assert TIME_PER_FRAME == pytest.approx(1 / 60)


def test_game_opens_window_of_fixed_size(assets_dir):
    game = Game()
    assert game.context.window.is_open is True
    assert game.context.window.size == (640, 320)
    assert pygame.display.get_surface().get_size() == WINDOW_SIZE


def test_menu_is_scheduled_not_yet_pushed(assets_dir):
    game = Game()
    assert len(game.context.states) == 0
    game.context.states.process_state_change()
    assert isinstance(game.context.states.current_state(), MainMenu)


def test_run_stops_when_window_is_closed(assets_dir):
    game = Game()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()
    assert game.context.window.is_open is False
    assert isinstance(game.context.states.current_state(), MainMenu)


def test_run_exits_through_menu_exit_button(assets_dir):
    game = Game()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    game.run()
    menu = game.context.states.current_state()
    assert menu.exit_pressed is True
    assert game.context.window.is_open is False


def test_run_without_font_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    game = Game()
    with pytest.raises(KeyError):
        game.run()


def test_main_returns_zero_after_window_closes(assets_dir):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        result = main([])
    assert result == 0
    assert pygame.display.get_init() is False