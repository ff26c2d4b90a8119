import pytest
import pygame
from unittest.mock import MagicMock, patch, ANY
from game.renderer import Renderer
from game.game import Game
from config import BLACK, ORANGE

SMALL_LAYOUT = (
    "XXXXXXX",
    "XPooOFX",
    "XXXXXXX",
)
SPRITE_DIR = 'app/style/graphics/spriteSheets/pickups/'


@pytest.fixture
def setup_renderer():
    """
    創建使用模擬畫面和字體的 Renderer 實例。
    """
    screen = MagicMock()
    font = MagicMock()
    return Renderer(screen, font)


def test_render_draws_visible_pickups(setup_renderer):
    """
    測試渲染流程：清空畫面、繪製可見的拾取物，隱藏的水果不繪製。
    """
    renderer = setup_renderer
    game = Game(SMALL_LAYOUT, scale=8)

    with patch('pygame.draw.rect') as mock_rect, \
         patch('pygame.draw.circle') as mock_circle, \
         patch('pygame.image.load') as mock_load, \
         patch('pygame.transform.smoothscale') as mock_scale:

        sprite = MagicMock()
        mock_scale.return_value = sprite

        renderer.render(game)

        renderer.screen.fill.assert_called_once_with(BLACK)
        assert mock_rect.call_count == sum(row.count('X') for row in SMALL_LAYOUT)
        mock_circle.assert_called_once()
        loaded = sorted(args[0][0] for args in mock_load.call_args_list)
        assert loaded == [SPRITE_DIR + 'pacdot.svg', SPRITE_DIR + 'powerPellet.svg']
        renderer.screen.blit.assert_any_call(sprite, (19.0, 11.0))
        renderer.screen.blit.assert_any_call(sprite, (32.0, 8.0))
        # 兩個豆子 + 一個能量球 + 兩行文字
        assert renderer.screen.blit.call_count == 5


def test_render_caches_sprites(setup_renderer):
    renderer = setup_renderer
    game = Game(SMALL_LAYOUT, scale=8)

    with patch('pygame.draw.rect'), patch('pygame.draw.circle'), \
         patch('pygame.image.load') as mock_load, patch('pygame.transform.smoothscale'):
        renderer.render(game)
        renderer.render(game)

    assert mock_load.call_count == 2


def test_render_shows_revealed_fruit(setup_renderer):
    renderer = setup_renderer
    game = Game(SMALL_LAYOUT, scale=8)
    game.fruits[0].show_fruit(700)

    with patch('pygame.draw.rect'), patch('pygame.draw.circle'), \
         patch('pygame.image.load') as mock_load, patch('pygame.transform.smoothscale'):
        renderer.render(game)

    mock_load.assert_any_call(SPRITE_DIR + 'apple.svg')


def test_render_falls_back_when_sprite_missing(setup_renderer, capsys):
    renderer = setup_renderer
    game = Game(SMALL_LAYOUT, scale=8)

    with patch('pygame.draw.rect'), patch('pygame.draw.circle'), \
         patch('pygame.draw.ellipse') as mock_ellipse, \
         patch('pygame.image.load', side_effect=FileNotFoundError('missing')):
        renderer.render(game)

    assert mock_ellipse.call_count == 3
    mock_ellipse.assert_any_call(renderer.screen, ORANGE, pygame.Rect(19, 11, 2, 2))
    assert 'unavailable' in capsys.readouterr().out


def test_render_hides_eaten_pickups(setup_renderer):
    renderer = setup_renderer
    game = Game(SMALL_LAYOUT, scale=8)
    game.update(lambda: game.player.reset(2, 1))

    with patch('pygame.draw.rect'), patch('pygame.draw.circle'), \
         patch('pygame.image.load'), patch('pygame.transform.smoothscale'):
        renderer.render(game)

    assert renderer.screen.blit.call_count == 4
    renderer.screen.blit.assert_any_call(ANY, (10, 10))
