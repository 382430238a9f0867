"""Simple programmable sound generator driver: eight channels in XRAM.

Each channel occupies an 8-byte register block::

    offset 0-1  frequency in hertz, little endian
    offset 2    duty
    offset 3    volume / attack
    offset 4    volume / decay
    offset 5    waveform / release
    offset 6    pan / gate (bit 0 is the gate)
    offset 7    unused
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum

PSG_CHANNELS = 8
CHANNEL_SIZE = 8
PAN_GATE_OFFSET = 6
XRAM_BYTES = PSG_CHANNELS * CHANNEL_SIZE

WAVE_SINE = 0x00
WAVE_SQUARE = 0x10
WAVE_SAW = 0x20
WAVE_TRI = 0x30
WAVE_NOISE = 0x40

NOTE_FREQS = (
    83, 87, 93, 98, 104, 110, 117, 124,
    131, 139, 147, 156, 165, 175, 185, 196,
    208, 220, 233, 247, 262, 278, 294, 311,
    330, 350, 370, 392, 416, 440, 467, 494,
    524, 555, 588, 623, 660, 699, 741, 785,
    832, 881, 933, 989, 1048, 1110, 1176, 1246,
    1320, 1398, 1482, 1570, 1663, 1762, 1867, 1978,
    2095, 2220, 2352, 2492, 2640, 2797, 2963, 3140,
    3326, 3524, 3734, 3956, 4191, 4440, 4704, 4984,
    5280, 5594, 5927, 6279, 6652, 7048, 7467, 7911,
    8381, 8880, 9408, 9967, 10560, 11188, 11853, 12558,
)

_SEMITONES = (
    ("A",), ("AS", "BB"), ("B",), ("C",), ("CS", "DB"), ("D",),
    ("DS", "EB"), ("E",), ("F",), ("FS", "GB"), ("G",), ("GS", "AB"),
)


def _note_members() -> list[tuple[str, int]]:
    members = []
    for value in range(len(NOTE_FREQS)):
        octave = (value + 9) // 12
        for name in _SEMITONES[value % 12]:
            members.append((f"{name}{octave}", value))
    return members


Note = IntEnum("Note", _note_members())
Note.__doc__ = "Note names from A0 to C8; sharps end in S, flats in B."


@dataclass(slots=True)
class _Channel:
    xaddr: int
    duration: int = 0
    release: int = 0


class Psg:
    """Sound effect and note scheduler writing channel registers into XRAM."""

    def __init__(self, xram: bytearray, xaddr: int) -> None:
        if xaddr < 0 or xaddr + XRAM_BYTES > len(xram):
            raise ValueError(
                f"XRAM region at {xaddr:#x} needs {XRAM_BYTES} bytes"
            )
        self.xram = xram
        self.xaddr = xaddr
        xram[xaddr:xaddr + XRAM_BYTES] = bytes(XRAM_BYTES)
        channels = [
            _Channel(xaddr + index * CHANNEL_SIZE) for index in range(PSG_CHANNELS)
        ]
        self._free: deque[_Channel] = deque(channels)
        self._playing: list[_Channel] = []
        self._releasing: list[_Channel] = []
        self._song: bytes | None = None
        self._ticks = 0
        self._durations = 0

    def tick(self, tempo: int) -> bool:
        """Advance one tick; return True when scheduling work was done.

        Tempo + 1 ticks make one duration unit. Work happens on the two
        adjacent ticks that end each unit.
        """
        if self._ticks == 1:
            while self._playing and self._playing[0].duration <= 1:
                channel = self._playing.pop(0)
                index = next(
                    (
                        i
                        for i, other in enumerate(self._releasing)
                        if not channel.release > other.release
                    ),
                    len(self._releasing),
                )
                self._releasing.insert(index, channel)
                self.xram[channel.xaddr + PAN_GATE_OFFSET] &= 0xFE
            for channel in self._playing:
                channel.duration = (channel.duration - 1) & 0xFF
            self._ticks -= 1
            return True
        if self._ticks == 0:
            while self._releasing and self._releasing[0].release == 0:
                self._free.appendleft(self._releasing.pop(0))
            for channel in self._releasing:
                channel.release = (channel.release - 1) & 0xFF
            if self._durations > 1:
                self._durations -= 1
            self._ticks = tempo
            return True
        self._ticks -= 1
        return False

    def play_note(
        self,
        note: int,
        duration: int,
        release: int,
        duty: int,
        vol_attack: int,
        vol_decay: int,
        wave_release: int,
        pan: int,
    ) -> int | None:
        """Start a note on a free channel.

        Returns the XRAM address of the channel's registers, or None when
        every channel is busy.
        """
        if not 0 <= note < len(NOTE_FREQS):
            raise ValueError(f"note out of range: {note}")
        freq = NOTE_FREQS[note]
        if not self._free:
            return None
        channel = self._free.popleft()
        duration &= 0xFF
        index = next(
            (
                i
                for i, other in enumerate(self._playing)
                if not duration > other.duration
            ),
            len(self._playing),
        )
        self._playing.insert(index, channel)
        channel.duration = duration
        channel.release = release & 0xFF
        self.xram[channel.xaddr:channel.xaddr + 7] = bytes(
            (
                freq & 0xFF,
                (freq >> 8) & 0xFF,
                duty & 0xFF,
                vol_attack & 0xFF,
                vol_decay & 0xFF,
                wave_release & 0xFF,
                (pan & 0xFF) | 0x01,
            )
        )
        return channel.xaddr

    def play_song(self, song: bytes | None) -> None:
        """Point the song position at new music."""
        self._song = None if song is None else bytes(song)

    def playing(self) -> bool:
        """True while a song is pending or any channel is still gated."""
        return bool(self._song and self._song[0]) or bool(self._playing)