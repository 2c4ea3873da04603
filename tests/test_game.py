import numpy as np
import pygame
import pytest
from PIL import Image

from raycube.game import Game, main
from raycube.render import Texture
from raycube.scene import WIN_WIDTH, Scene, find_player

ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def make_game():
    textures = [Texture(np.full((8, 8), c, dtype=np.uint32)) for c in (1, 2, 3, 4)]
    scene = Scene(list(ROOM), ("a", "b", "c", "d"), (0, 0, 0), (0, 0, 0))
    return Game(scene, textures)


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_game_finds_player_when_missing():
    game = make_game()
    assert game.scene.player is game.player
    assert (game.player.pos_x, game.player.pos_y) == (2.5, 2.5)


def test_escape_and_quit_end_the_game():
    game = make_game()
    assert game.handle_event(key(pygame.K_ESCAPE)) is False
    assert game.handle_event(pygame.event.Event(pygame.QUIT)) is False


def test_forward_key_moves_player():
    game = make_game()
    before = game.player.pos_y
    assert game.handle_event(key(pygame.K_w)) is True
    assert game.player.pos_y < before


def test_turn_key_rotates_player():
    game = make_game()
    game.handle_event(key(pygame.K_RIGHT))
    assert game.player.dir_x > 0


def test_unknown_key_changes_nothing():
    game = make_game()
    before = (game.player.pos_x, game.player.pos_y, game.player.dir_x)
    assert game.handle_event(key(pygame.K_q)) is True
    assert (game.player.pos_x, game.player.pos_y, game.player.dir_x) == before


def test_mouse_near_right_edge_rotates():
    game = make_game()
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(WIN_WIDTH - 1, 0))
    assert game.handle_event(event) is True
    assert game.player.dir_x > 0


def test_mouse_in_middle_does_not_rotate():
    game = make_game()
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(WIN_WIDTH // 2, 0))
    game.handle_event(event)
    assert game.player.dir_x == 0.0


def test_game_loads_textures_from_scene(tmp_path):
    paths = []
    for name in ("no", "ea", "so", "we"):
        path = tmp_path / f"{name}.png"
        Image.new("RGB", (8, 8), (0, 0, 255)).save(path)
        paths.append(str(path))
    scene = Scene(list(ROOM), tuple(paths), (0, 0, 0), (0, 0, 0), find_player(ROOM))
    game = Game(scene)
    assert len(game.textures) == 4
    assert game.textures[0].pixels[0, 0] == 0x0000FF


def test_wrong_texture_count_rejected():
    scene = Scene(list(ROOM), ("a", "b", "c", "d"), (0, 0, 0), (0, 0, 0))
    with pytest.raises(ValueError):
        Game(scene, [])


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert "Wrong amount of arguments" in capsys.readouterr().out


def test_main_rejects_wrong_extension(tmp_path, capsys):
    assert main([str(tmp_path / "map.txt")]) == 1
    assert "Wrong map extension" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Wrong map path" in capsys.readouterr().out