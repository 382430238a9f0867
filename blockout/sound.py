"""Game sound effects and interpolated note sweeps on top of the PSG."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockout.psg import WAVE_SQUARE, Note, Psg

PSG_BASE = 0xFEC0
MAX_INTERPOLATED_SOUNDS = 4

PAN_LEFT = -63
PAN_RIGHT = 63
PAN_CENTER = 0


@dataclass(frozen=True)
class SoundSweep:
    """Parameters of a note sequence that moves from start to end values."""

    start_note: int
    end_note: int
    start_duty: int
    end_duty: int
    start_vol_attack: int
    end_vol_attack: int
    start_vol_decay: int
    end_vol_decay: int
    start_wave: int
    end_wave: int
    start_pan: int
    end_pan: int
    note_duration: int
    release: int
    steps: int
    loop: bool = False


@dataclass
class InterpolatedSound:
    """Playback state of one sweep slot."""

    sweep: SoundSweep | None = None
    current_step: int = 0
    frame_counter: int = 0
    active: bool = False
    psg_addr: int | None = None


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _lerp(start: int, end: int, step: int, total_steps: int) -> int:
    if total_steps <= 1:
        return start
    return start + _trunc_div((end - start) * step, total_steps - 1)


def _lerp_u8(start: int, end: int, step: int, total_steps: int) -> int:
    return _lerp(start, end, step, total_steps) & 0xFF


def _lerp_i8(start: int, end: int, step: int, total_steps: int) -> int:
    return ((_lerp(start, end, step, total_steps) + 128) & 0xFF) - 128


class SoundSystem:
    """Owns the interpolated sound slots and the game's sound effects."""

    def __init__(self, psg: Psg) -> None:
        self.psg = psg
        self.sounds = [InterpolatedSound() for _ in range(MAX_INTERPOLATED_SOUNDS)]

    def start_interpolated_sound(self, sweep: SoundSweep) -> InterpolatedSound | None:
        """Start a sweep in a free slot; None if no slot is free or steps is 0."""
        if sweep.steps == 0:
            return None
        sound = next((s for s in self.sounds if not s.active), None)
        if sound is None:
            return None
        sound.sweep = sweep
        sound.current_step = 0
        sound.frame_counter = 0
        sound.active = True
        sound.psg_addr = None
        return sound

    def stop_interpolated_sound(self, handle: InterpolatedSound | None) -> None:
        """Stop a sweep; a None handle is ignored."""
        if handle is not None:
            handle.active = False
            handle.psg_addr = None

    def update_interpolated_sounds(self) -> None:
        """Advance every active sweep by one frame, playing notes when due."""
        for sound in self.sounds:
            if not sound.active or sound.sweep is None:
                continue
            sweep = sound.sweep
            sound.frame_counter = (sound.frame_counter + 1) & 0xFF
            if sound.frame_counter < sweep.note_duration:
                continue
            sound.frame_counter = 0
            step, total = sound.current_step, sweep.steps
            is_last = step == total - 1
            note_release = sweep.release if is_last and not sweep.loop else 0
            sound.psg_addr = self.psg.play_note(
                _lerp_u8(sweep.start_note, sweep.end_note, step, total),
                sweep.note_duration,
                note_release,
                _lerp_u8(sweep.start_duty, sweep.end_duty, step, total),
                _lerp_u8(sweep.start_vol_attack, sweep.end_vol_attack, step, total),
                _lerp_u8(sweep.start_vol_decay, sweep.end_vol_decay, step, total),
                _lerp_u8(sweep.start_wave, sweep.end_wave, step, total),
                _lerp_i8(sweep.start_pan, sweep.end_pan, step, total),
            )
            sound.current_step += 1
            if sound.current_step >= total:
                if sweep.loop:
                    sound.current_step = 0
                else:
                    sound.active = False

    def update(self) -> None:
        """Per-frame work: tick the PSG and advance the sweeps."""
        self.psg.tick(1)
        self.update_interpolated_sounds()

    def play_drop(self) -> int | None:
        return self.psg.play_note(Note.D1, 5, 0, 155, 0x56, 0xF7, 0x49, PAN_CENTER)

    def play_clear_level(self) -> int | None:
        return self.psg.play_note(Note.GS3, 10, 10, 191, 0x08, 0xF8, 0x0B, PAN_CENTER)

    def play_clear_level_all(self) -> int | None:
        return self.psg.play_note(Note.CS5, 10, 10, 191, 0x08, 0xF8, 0x0A, PAN_CENTER)

    def start_game_over(self) -> InterpolatedSound | None:
        """Start the falling alarm sweep played when the game ends."""
        return self.start_interpolated_sound(
            SoundSweep(
                start_note=Note.C5,
                end_note=Note.C2,
                start_duty=0x80,
                end_duty=0xFF,
                start_vol_attack=0x40,
                end_vol_attack=0xC0,
                start_vol_decay=0x47,
                end_vol_decay=0xCA,
                start_wave=WAVE_SQUARE,
                end_wave=0x4A,
                start_pan=PAN_CENTER,
                end_pan=PAN_CENTER,
                note_duration=2,
                release=10,
                steps=30,
                loop=False,
            )
        )