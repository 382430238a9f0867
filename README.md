# blockout

Building blocks for a 3D falling-block puzzle game, where pieces drop into a
pit and a layer that fills up completely is cleared. The package provides the
pit grid, the piece set with rotation and wall kicks, a note scheduler for a
programmable sound generator with the game's sound effects, a 5x7 bitmap
font, and an in-memory canvas with polygon filling. It is a library with no
dependencies beyond the standard library.

## Modules

- `blockout.colors`: the 16-colour palette (`Color`).
  `color_from_rgb5(r, g, b)` packs 5-bit channels into a 16-bit pixel value.
  `color(index, bpp16)` returns the palette index itself, or black when the
  index is out of range. With `bpp16` set, it returns an opaque RGB value
  instead, or transparent black for index 0 and for indices out of range.
- `blockout.font`: a 5x7 ASCII bitmap font with 256 glyphs.
  `glyph(code)` returns a glyph's five column bytes, with bit 0 as the top
  row. `char_pixels(code)` returns the glyph as rows of booleans. `code` may
  be an integer or a one-character string. Anything out of range raises
  `ValueError`.
- `blockout.psg`: an eight-channel sound generator scheduler that writes
  channel registers into a caller-supplied `bytearray` (`Psg(xram, xaddr)`).
  `play_note(...)` takes a free channel and returns its register address,
  or `None` when every channel is busy. `tick(tempo)` moves channels from
  playing to releasing to free, and clears the gate bit when a note ends.
  `Note` names the pitches from `A0` to `C8`. Sharps end in `S` and flats in
  `B`, for example `Note.CS5` and `Note.DB5`.
- `blockout.sound`: `SoundSystem(psg)` plays the game's effects with
  `play_drop`, `play_clear_level`, `play_clear_level_all` and
  `start_game_over`, and runs up to four interpolated sweeps. A `SoundSweep`
  describes a sequence of notes whose pitch, duty, volume, waveform and pan
  glide from start values to end values. `start_interpolated_sound` returns
  the `InterpolatedSound` slot that plays it. Call `update()` once per frame:
  it ticks the PSG and advances the sweeps.
- `blockout.pit`: `Pit(width, depth, height)` is the occupancy and colour
  grid, up to 5 x 5 x 8 cells. Layer 0 is the top of the pit. It provides
  `fill`, `is_occupied`, `in_bounds`, `is_layer_complete`, `clear_layer`
  (the layers above the cleared one shift down), `count_occupied_levels` and
  `reset`. `LAYER_COLORS` gives the colour of each layer.
- `blockout.canvas`: `Canvas(width, height)` holds indexed-colour pixels,
  clipped at the edges. It draws with `set`, `get`, `draw_line`
  (Bresenham), `draw_hline`, `draw_vline` and `fill_rect`, and clears with
  `erase`.
- `blockout.shapes`: the eight pieces in `SHAPES`. `rotated_offset` and
  `rotated_blocks` snap each angle (0 to 255) to quarter turns.
  `is_rotation_valid_at` checks a placement against a `Pit`.
  `try_wall_kick` returns the first position among the start position and
  22 kick offsets where the piece fits, or `None`.
- `blockout.raster`: `poly_spans(points, stride)` scan-converts a polygon
  clamped to a 256 x 180 screen into `(y, left, right)` spans, and
  `fill_poly` draws those spans on a canvas. `cube_faces(pit, x, y, z)`
  lists the faces of a settled cube that no neighbour hides.
  `draw_level_indicator(canvas, pit, indicator_top)` draws the column that
  shows which layers hold blocks.

## Example

```python
from blockout.canvas import Canvas
from blockout.colors import Color
from blockout.pit import Pit
from blockout.psg import Psg
from blockout.raster import draw_level_indicator, fill_poly
from blockout.shapes import ANGLE_STEP_90, SHAPES, rotated_blocks, try_wall_kick
from blockout.sound import PSG_BASE, SoundSystem

pit = Pit(5, 5, 8)
shape = SHAPES[4]  # the L piece

position = try_wall_kick(shape, pit, 0, ANGLE_STEP_90, 0, 2, 2, 0)
if position is not None:
    x, y, z = position
    for rx, ry, rz in rotated_blocks(shape, 0, ANGLE_STEP_90, 0):
        pit.fill(x + rx, y + ry, z + rz)

sound = SoundSystem(Psg(bytearray(0x10000), PSG_BASE))
sound.play_drop()
for _ in range(60):
    sound.update()

canvas = Canvas(320, 180)
fill_poly(canvas, [(40, 40), (80, 40), (80, 70), (40, 70)], Color.RED)
draw_level_indicator(canvas, pit, 20)
```

## What it does not do

- It has no game loop or state machine. Spawning pieces, gravity, fast drop,
  the lock delay, keyboard handling, scoring, levels and game over are left
  to the caller, who can build them from `Pit` and `blockout.shapes`.
- It has no perspective projection of the pit or the falling piece. It does
  not open a window or display anything. All drawing goes into a `Canvas`
  in memory.
- It makes no sound. `Psg` only writes register bytes into the `bytearray`
  it is given, and song playback goes no further than recording the song
  with `play_song` and reporting it with `playing`.
- It has no command to run.

## Tests

```
pip install -e ".[test]"
pytest
```