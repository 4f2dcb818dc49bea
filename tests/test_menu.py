from types import SimpleNamespace

import pygame
import pytest

from songe.media import Sound, SoundStatus
from songe.menu import Menu
from songe.resources import ResourceError, Resources
from songe.state import Context


class Clip:
    """Stands in for a pygame sound; it plays until told it has finished."""

    def __init__(self):
        self.plays = 0
        self.busy = False
        self.level = 1.0

    def play(self, loops=0):
        self.plays += 1
        self.busy = True
        return SimpleNamespace(get_busy=lambda: self.busy, get_sound=lambda: self)

    def stop(self):
        self.busy = False

    finish = stop

    def set_volume(self, value):
        self.level = value


class Glyphs:
    """A font whose glyphs are all half as wide as they are tall."""

    def __init__(self, point):
        self.point = point

    def size(self, text):
        return (self.point * len(text) // 2, self.point)

    def render(self, text, antialias, color):
        return SimpleNamespace(text=text, color=color)


class Assets:
    def __init__(self, missing=()):
        self.missing = set(missing)
        self.clips = {}

    def _check(self, path):
        if path in self.missing:
            raise FileNotFoundError(path)

    def load_sound(self, path, loop):
        self._check(path)
        self.clips[path] = Clip()
        return Sound(self.clips[path], loop)

    def load_font(self, path, size):
        self._check(path)
        return Glyphs(size)


class Canvas(list):
    def blit(self, image, position):
        self.append((image, position))


class DemoMenu(Menu):
    def init_options(self):
        return ["Jouer", "Scores", "Quitter"]

    def init_options_voices(self):
        return [self.context.resources.voice(n) for n in ("jouer", "scores", "quitter")]


def make_menu(title="Bienvenue", music=True, missing=()):
    resources = Resources()
    assets = Assets({m if m.startswith(".") else resources.voice(m) for m in missing})
    context = Context(resources=resources, media=assets, size=(800, 600))
    menu = DemoMenu(context, title, resources.voice("bienvenue"), resources.music("fond") if music else "")
    menu.init()
    return menu


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def clip_of(menu, path):
    return menu.context.media.clips[path]


def test_init_loads_options_and_voices():
    menu = make_menu()
    assert menu.options == ["Jouer", "Scores", "Quitter"]
    assert len(menu.option_sounds) == len(menu.options)
    assert menu.options_voices[0] == menu.context.resources.voice("jouer")
    assert menu.music.loop is True
    assert menu.selected == 0


def test_menu_without_music():
    menu = make_menu(music=False)
    assert menu.music is None
    menu.on_enter()
    assert menu.title_sound.status is SoundStatus.PLAYING


def test_missing_voice_is_reported():
    with pytest.raises(ResourceError, match="could not be found"):
        make_menu(missing=("scores",))


def test_missing_font_is_reported():
    with pytest.raises(ResourceError, match=f"Font {Menu.FONT_NAME}"):
        make_menu(missing=(Resources().font(Menu.FONT_NAME),))


def test_title_font_fits_title_width():
    menu = make_menu()
    assert menu.font.size(menu.title)[0] <= menu.title_width
    assert len(menu.title) * (menu.font_size + 1) // 2 > menu.title_width


def test_empty_title_keeps_default_font_size():
    assert make_menu(title="").font_size == Menu.FONT_SIZE


def test_navigation_wraps():
    menu = make_menu()
    menu.select_previous()
    assert menu.selected == len(menu.options) - 1
    menu.select_next()
    assert menu.selected == 0


def test_select_out_of_range():
    menu = make_menu()
    with pytest.raises(IndexError):
        menu.select(len(menu.options))


def test_complex_events_leave_selection_alone():
    menu = make_menu()
    menu.complex_events()
    assert menu.selected == 0


def test_key_down_announces_when_title_done():
    menu = make_menu()
    menu.on_enter()
    clip_of(menu, menu.title_voice).finish()
    menu.handle_event(key(pygame.K_DOWN))
    assert menu.selected == 1
    assert menu.option_sounds[1].status is SoundStatus.PLAYING
    assert menu.music.volume == Menu.VOLUME_WHEN_PLAYING


def test_key_while_title_plays_is_silent():
    menu = make_menu()
    menu.on_enter()
    menu.handle_event(key(pygame.K_RIGHT))
    assert menu.selected == 1
    assert menu.option_sounds[1].status is SoundStatus.STOPPED
    assert menu.music.volume == 100


def test_other_events_ignored():
    menu = make_menu()
    menu.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1)))
    menu.handle_event(key(pygame.K_a))
    assert menu.selected == 0


def test_update_reads_first_option_once():
    menu = make_menu()
    menu.on_enter()
    first = clip_of(menu, menu.options_voices[0])
    menu.update()
    assert first.plays == 0
    clip_of(menu, menu.title_voice).finish()
    menu.update()
    menu.update()
    assert first.plays == 1


def test_music_fades_back_after_voice():
    menu = make_menu()
    menu.on_enter()
    clip_of(menu, menu.title_voice).finish()
    menu.update()
    clip_of(menu, menu.options_voices[0]).finish()
    menu.handle_event(key(pygame.K_DOWN))
    menu.update()
    assert menu.music.volume == Menu.VOLUME_WHEN_PLAYING
    clip_of(menu, menu.options_voices[1]).finish()
    menu.update()
    assert menu.music.volume == Menu.VOLUME_WHEN_PLAYING + 1


def test_reset_restores_selection_and_volume():
    menu = make_menu()
    menu.select(2)
    menu.music.volume = 0
    menu.reset()
    assert (menu.selected, menu.music.volume) == (0, 100)


def test_on_leave_stops_everything():
    menu = make_menu()
    menu.on_enter()
    menu.option_sounds[0].play()
    menu.on_leave()
    sounds = [menu.music, menu.title_sound, *menu.option_sounds]
    assert all(s.status is SoundStatus.STOPPED for s in sounds)


def test_item_positions_are_centred_and_stacked():
    menu = make_menu()
    for index, text in enumerate(menu.options):
        x, _ = menu.item_position(index)
        assert x + menu.font.size(text)[0] / 2 == menu.context.width // 2
    assert menu.item_position(1)[1] - menu.item_position(0)[1] == menu.item_height


def test_render_draws_title_and_items():
    menu = make_menu()
    menu.select(1)
    canvas = Canvas()
    menu.render(canvas)
    assert [image.text for image, _ in canvas] == [menu.title, *menu.options]
    colors = {image.text: image.color for image, _ in canvas}
    assert colors["Scores"] == Menu.SEL_ITEM_TEXT_COLOR
    assert colors["Jouer"] == Menu.ITEM_TEXT_COLOR
    assert colors[menu.title] == Menu.TITLE_TEXT_COLOR


def test_render_skips_empty_title():
    menu = make_menu(title="")
    canvas = Canvas()
    menu.render(canvas)
    assert [image.text for image, _ in canvas] == menu.options