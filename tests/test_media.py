import os
from types import SimpleNamespace

import pygame
import pytest

from songe.media import PygameMedia, Sound, SoundStatus


class FakeClip:
    """Records what the sound asks of it; its channel stays busy until stopped."""

    def __init__(self):
        self.channel = self.volume = self.loops = None
        self.plays = 0

    def play(self, loops=0):
        self.plays += 1
        self.loops = loops
        channel = SimpleNamespace(busy=True)
        channel.get_busy = lambda: channel.busy
        channel.get_sound = lambda: self
        self.channel = channel
        return channel

    def stop(self):
        if self.channel is not None:
            self.channel.busy = False

    def set_volume(self, value):
        self.volume = value


def test_new_sound_is_stopped_at_full_volume():
    clip = FakeClip()
    sound = Sound(clip)
    assert sound.status is SoundStatus.STOPPED
    assert sound.volume == 100
    assert clip.volume == 1.0


def test_play_then_stop():
    sound = Sound(FakeClip())
    sound.play()
    assert sound.status is SoundStatus.PLAYING
    sound.stop()
    assert sound.status is SoundStatus.STOPPED


def test_finished_clip_reports_stopped():
    clip = FakeClip()
    sound = Sound(clip)
    sound.play()
    clip.channel.busy = False
    assert sound.status is SoundStatus.STOPPED


@pytest.mark.parametrize("loop, loops", [(True, -1), (False, 0)])
def test_loop_setting_sets_play_count(loop, loops):
    clip = FakeClip()
    Sound(clip, loop=loop).play()
    assert clip.loops == loops


def test_volume_is_scaled_and_clamped():
    clip = FakeClip()
    sound = Sound(clip)
    sound.volume = 50
    assert clip.volume == pytest.approx(0.5)
    sound.volume = 250
    assert sound.volume == 100
    sound.volume = -3
    assert sound.volume == 0


@pytest.mark.parametrize(
    "load, suffix",
    [
        (lambda media, path: media.load_sound(path, False), ".ogg"),
        (lambda media, path: media.load_font(path, 12), ".ttf"),
        (lambda media, path: media.load_image(path), ".png"),
    ],
)
def test_missing_files_raise(tmp_path, load, suffix):
    with pytest.raises(FileNotFoundError):
        load(PygameMedia(), str(tmp_path / ("nope" + suffix)))


def test_load_image_round_trip(tmp_path):
    path = str(tmp_path / "pic.png")
    pygame.image.save(pygame.Surface((4, 3)), path)
    assert PygameMedia().load_image(path).get_size() == (4, 3)


def test_load_font_grows_with_size():
    path = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    media = PygameMedia()
    small, large = (media.load_font(path, size) for size in (10, 40))
    assert large.size("Songe")[0] > small.size("Songe")[0]