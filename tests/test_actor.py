import pygame
import pytest

from hexmaze.actor import START_POSITION, Actor

RED = (255, 0, 0, 255)
START_X, START_Y = START_POSITION


def _image(colour=RED):
    image = pygame.Surface((16, 16))
    image.fill(colour)
    return image


def _actor(colour=RED):
    actor = Actor()
    actor.init(_image(colour))
    return actor


@pytest.fixture
def actor():
    return _actor()


def test_init_places_actor_at_start(actor):
    assert tuple(actor.position) == START_POSITION
    assert actor.bounds == pygame.Rect(START_POSITION, (16, 16))


def test_init_resets_position(actor):
    actor.move((48, 0))
    actor.init(_image())
    assert tuple(actor.position) == START_POSITION


def test_move_then_reverse_returns_to_start(actor):
    actor.move((16, 0))
    actor.move(-pygame.Vector2(16, 0))
    assert tuple(actor.position) == START_POSITION


def test_move_shifts_bounds_by_direction(actor):
    before = actor.bounds
    actor.move((0, -16))
    assert actor.bounds == before.move(0, -16)


@pytest.mark.parametrize(
    "rect, expected",
    [
        (pygame.Rect(START_POSITION, (16, 16)), True),
        (pygame.Rect((START_X + 16, START_Y), (16, 16)), False),
        (pygame.Rect(START_POSITION, (8, 8)), False),
    ],
)
def test_is_on_rect_matches_exact_area_only(actor, rect, expected):
    assert actor.is_on(rect) is expected


def test_is_on_other_actor(actor):
    ghost = _actor((0, 0, 255))
    assert actor.is_on(ghost)
    ghost.move((16, 0))
    assert not actor.is_on(ghost)
    actor.move((16, 0))
    assert actor.is_on(ghost)


def test_draw_blits_image_at_position(actor):
    target = pygame.Surface((64, 64))
    target.fill((0, 0, 0))
    actor.draw(target)
    assert tuple(target.get_at(START_POSITION)) == RED
    assert tuple(target.get_at((0, 0))) == (0, 0, 0, 255)


def test_actor_without_image_has_no_bounds():
    bare = Actor()
    with pytest.raises(RuntimeError):
        bare.bounds
    with pytest.raises(RuntimeError):
        bare.draw(pygame.Surface((16, 16)))