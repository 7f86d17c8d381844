"""Adapter: let a plain mp3 player hand vlc and mp4 files to advanced players."""

from __future__ import annotations

from typing import Protocol

from ..observer.notifier import Inform


SUPPORTED_FORMATS = ("mp3", "mp4", "vlc")


class AdvancedMediaPlayer(Protocol):
    def play_vlc(self, file_name: str) -> None:
        ...

    def play_mp4(self, file_name: str) -> None:
        ...


class VlcPlayer:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def play_vlc(self, file_name: str) -> None:
        self._inform(f"Playing vlc file: {file_name}")

    def play_mp4(self, file_name: str) -> None:
        pass


class Mp4Player:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def play_vlc(self, file_name: str) -> None:
        pass

    def play_mp4(self, file_name: str) -> None:
        self._inform(f"Playing mp4 file: {file_name}")


class MediaAdapter:
    """Exposes `play(audio_type, file_name)` on top of an advanced player."""

    def __init__(self, audio_type: str, inform: Inform = print) -> None:
        if audio_type == "vlc":
            self.advanced_player: AdvancedMediaPlayer = VlcPlayer(inform)
        elif audio_type == "mp4":
            self.advanced_player = Mp4Player(inform)
        else:
            raise ValueError("Unsupported format")

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "vlc":
            self.advanced_player.play_vlc(file_name)
        elif audio_type == "mp4":
            self.advanced_player.play_mp4(file_name)


class AudioPlayer:
    def __init__(self, inform: Inform = print) -> None:
        self._inform = inform

    def play(self, audio_type: str, file_name: str) -> bool:
        """Play `file_name`; returns False for unsupported formats."""
        if audio_type == "mp3":
            self._inform(f"Playing mp3 file: {file_name}")
            return True
        if audio_type in SUPPORTED_FORMATS[1:]:
            MediaAdapter(audio_type, self._inform).play(audio_type, file_name)
            return True
        listed = ", ".join(SUPPORTED_FORMATS[:-1])
        self._inform(f"Invalid media format. Only {listed}, and {SUPPORTED_FORMATS[-1]} are supported.")
        return False
