from blockout.psg import NOTE_FREQS, PAN_GATE_OFFSET, Note, Psg
from blockout.sound import MAX_INTERPOLATED_SOUNDS, SoundSweep, SoundSystem

BASE = 0x40


def make_system():
    xram = bytearray(0x200)
    psg = Psg(xram, BASE)
    return xram, psg, SoundSystem(psg)


def sweep(start_note=Note.C3, end_note=Note.C4, steps=2, duration=1,
          loop=False, start_pan=0, end_pan=0):
    return SoundSweep(
        start_note, end_note, 0x10, 0x20, 0x30, 0x40, 0x50, 0x60,
        0x10, 0x10, start_pan, end_pan, duration, 5, steps, loop,
    )


def freq_at(xram, addr):
    return int.from_bytes(xram[addr:addr + 2], "little")


def test_zero_steps_gives_no_handle():
    _, _, system = make_system()
    assert system.start_interpolated_sound(sweep(steps=0)) is None


def test_slots_run_out():
    _, _, system = make_system()
    handles = [system.start_interpolated_sound(sweep()) for _ in range(MAX_INTERPOLATED_SOUNDS)]
    assert all(h is not None and h.active for h in handles)
    assert system.start_interpolated_sound(sweep()) is None


def test_stop_frees_slot():
    _, _, system = make_system()
    handles = [system.start_interpolated_sound(sweep()) for _ in range(MAX_INTERPOLATED_SOUNDS)]
    system.stop_interpolated_sound(handles[2])
    assert handles[2].active is False
    assert system.start_interpolated_sound(sweep()) is handles[2]
    system.stop_interpolated_sound(None)
    assert handles[2].active is True


def test_first_and_last_notes_match_sweep_ends():
    xram, _, system = make_system()
    handle = system.start_interpolated_sound(sweep(Note.C3, Note.C5, steps=4))
    freqs = []
    for _ in range(4):
        system.update_interpolated_sounds()
        freqs.append(freq_at(xram, handle.psg_addr))
    assert freqs[0] == NOTE_FREQS[Note.C3]
    assert freqs[-1] == NOTE_FREQS[Note.C5]
    assert freqs == sorted(freqs)
    assert handle.active is False


def test_note_duration_delays_notes():
    _, _, system = make_system()
    handle = system.start_interpolated_sound(sweep(duration=3))
    system.update_interpolated_sounds()
    system.update_interpolated_sounds()
    assert handle.psg_addr is None
    system.update_interpolated_sounds()
    assert handle.psg_addr == BASE
    assert handle.current_step == 1


def test_loop_restarts_sequence():
    _, _, system = make_system()
    handle = system.start_interpolated_sound(sweep(steps=2, loop=True))
    system.update_interpolated_sounds()
    system.update_interpolated_sounds()
    assert handle.active is True
    assert handle.current_step == 0


def test_negative_pan_written_with_gate():
    xram, _, system = make_system()
    handle = system.start_interpolated_sound(sweep(start_pan=-10, end_pan=10))
    system.update_interpolated_sounds()
    assert xram[handle.psg_addr + PAN_GATE_OFFSET] == ((-10) & 0xFF) | 1


def test_play_drop_registers():
    xram, _, system = make_system()
    addr = system.play_drop()
    assert freq_at(xram, addr) == NOTE_FREQS[Note.D1]
    assert xram[addr + 2:addr + 6] == bytes((155, 0x56, 0xF7, 0x49))


def test_clear_level_sounds():
    xram, _, system = make_system()
    first = system.play_clear_level()
    second = system.play_clear_level_all()
    assert freq_at(xram, first) == NOTE_FREQS[Note.GS3]
    assert freq_at(xram, second) == NOTE_FREQS[Note.CS5]
    assert xram[second + 5] == 0x0A


def test_game_over_sweep():
    xram, _, system = make_system()
    handle = system.start_game_over()
    assert handle.active is True
    assert handle.sweep.steps == 30
    assert handle.sweep.start_note == Note.C5
    system.update_interpolated_sounds()
    system.update_interpolated_sounds()
    assert freq_at(xram, handle.psg_addr) == NOTE_FREQS[Note.C5]


def test_update_ticks_psg_until_note_ends():
    _, psg, system = make_system()
    system.play_drop()
    assert psg.playing() is True
    for _ in range(20):
        system.update()
    assert psg.playing() is False