"""Game configuration and resource path lookup."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Window settings and the layout of the resource directory."""

    fullscreen: bool = False
    enable_vsync: bool = True
    show_cursor: bool = True
    window_width: int = 800
    window_height: int = 600
    framerate_limit: int = 60
    window_title: str = "Songe"
    resources_path: str = "./ressources/"

    @property
    def img_path(self) -> str:
        return self.resources_path + "images/"

    @property
    def img_sprites_path(self) -> str:
        return self.img_path + "sprites/"

    @property
    def img_textures_path(self) -> str:
        return self.img_path + "textures/"

    @property
    def img_tiles_path(self) -> str:
        return self.img_path + "tiles/"

    @property
    def snd_path(self) -> str:
        return self.resources_path + "sons/"

    @property
    def snd_deplacement_path(self) -> str:
        return self.snd_path + "deplacement/"

    @property
    def snd_environement_path(self) -> str:
        return self.snd_path + "environement/"

    @property
    def snd_bip_path(self) -> str:
        return self.snd_path + "bip/"

    @property
    def snd_voice_path(self) -> str:
        return self.snd_path + "voix/julie/"

    @property
    def snd_music_path(self) -> str:
        return self.snd_path + "musiques/"

    @property
    def snd_persos_path(self) -> str:
        return self.snd_path + "persos/"

    @property
    def font_path(self) -> str:
        return self.resources_path + "fonts/"

    @property
    def emitters_path(self) -> str:
        return self.resources_path + "emitters/"


class ResourceError(Exception):
    """A resource the game needs could not be loaded."""


class Resources:
    """Resolves resource names to file paths and holds shared game flags."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.has_already_played = False

    def voice(self, name: str) -> str:
        return self.config.snd_voice_path + name + ".ogg"

    def music(self, name: str) -> str:
        return self.config.snd_music_path + name + ".ogg"

    def image(self, name: str) -> str:
        return self.config.img_path + name

    def font(self, name: str) -> str:
        return self.config.font_path + name + ".ttf"

    def error(self, message: str) -> None:
        """Report a fatal resource problem."""
        raise ResourceError(message)