# core2kit

Helpers for a small embedded board, usable from plain Python: vector,
matrix and quaternion math, a field-by-field JSON writer, a one-bit
display framebuffer with a built-in font, keyboard character mapping, an
interrupt queue, and file and clock utilities. No third-party packages
are needed.

## Modules

- `core2kit.vec3`: operations on 3-component vectors given as any
  sequence: `add`, `sub`, `scale`, `negate`, `dot`, `cross`, `norm`,
  `normalize`, `mulv`, `broadcast`, comparisons (`eq`, `eq_eps`, `eq_all`,
  `eqv`, `eqv_eps`), `max_value`, `min_value`, `isnan`, `isinf`,
  `isvalid`, `sign` and `sqrt`. Results are tuples.
- `core2kit.vec4`: the same for 4-component vectors, plus `vec4`,
  `copy3`, `zero`, `one`, `norm2`, `adds`, `subs`, `mul`, `scale_as`,
  `div`, `divs`, `addadd`, `subadd`, `muladd`, `muladds`, `flipsign`,
  `inv`, `distance`, `maxv`, `minv`, `clamp`, `lerp`, and
  `plane_normalize` for a plane stored as `[A, B, C, D]`.
- `core2kit.affine`: 4×4 matrices stored as four column tuples
  (`m[column][row]`): `identity`, `mat4_mul`, `mat4_mulv`, `mul_rot`,
  `mat4_inv` (raises `ValueError` for a singular matrix), translation,
  scaling and rotation (`translate*`, `scale*`, `rotate*`), and
  decomposition (`decompose_scalev`, `uniscaled`, `decompose_rs`,
  `decompose`).
- `core2kit.euler`: rotation matrices from `[x, y, z]` angles in every
  axis order (`euler_xyz` … `euler_zyx`, `euler_by_order` with an
  `EulerOrder`), `euler_order` to pack an axis sequence, and
  `euler_angles` to get XYZ angles back from a matrix.
- `core2kit.quat`: quaternions stored as `(x, y, z, w)`: construction
  (`quat`, `quatv`, `identity`), `mul`, `conjugate`, `inv`, `normalize`,
  angle and axis, conversion to 3×3 and 4×4 matrices, `lerp`, `slerp`,
  `look`, `for_direction`, `for_points`, `rotatev` and matrix rotation.
- `core2kit.cam`: `frustum`, `ortho` and its bounding-box and default
  variants, `perspective`, `perspective_default`, `perspective_resize`,
  view matrices (`lookat`, `look`), and decomposition of perspective
  projections (`persp_decomp` returns a `Frustum` named tuple).
- `core2kit.project`: `project`, `unproject` and `unprojecti` between
  object space and viewport coordinates (`[x, y, width, height]`).
- `core2kit.jsonbuilder`: `JsonBuilder` writes a flat JSON object field
  by field (`add_string`, `add_int`, `add_field` with a `FieldType`).
  Floats are rounded to single precision and printed with six decimals,
  or two for the `*_DEC2` types. String values are inserted as given,
  without escaping. `serialize()` closes the object and returns its text;
  using the builder afterwards raises `RuntimeError`.
- `core2kit.oled`: `FrameBuffer`, a 128×64 one-bit buffer (rows of 16
  bytes, most significant bit leftmost) with a built-in font for
  characters `' '` to `'~'`: `get_pixel`, `set_pixel`, `blit_char`,
  `print_xy`, `scroll`, `print_line` and `to_bytes`.
- `core2kit.keyboard`: `map_char` gives the `(x, y)` cell of a character
  on an on-screen keyboard grid (`None` for NUL, CR and LF);
  `translate_keys` turns raw key bytes into text, CR to LF, NULs dropped.
- `core2kit.gpio`: `InterruptLine`, a bounded queue of pending edges for
  one pin: `enable`, `set`, `get` (blocks until an edge is pending),
  `clear`, and `handle(pin)`, which records an edge without waiting when
  enabled and the pin matches.
- `core2kit.filesystem`: `file_write`, `file_append`,
  `file_write_timesuffix` (the name holds one `%s` for the current time),
  `file_move` (the directory is joined to the base name as is, so end it
  with a separator), `file_mkdir` (returns `False` if the path exists)
  and `file_list`, a generator of `(full path, base name)`.
- `core2kit.clock`: `boot_seconds` and `seconds_since` on the monotonic
  clock, `time_now` (`DD.MM.YYYY. HH:MM:SS`) and `time_fmt`.
- `core2kit.system`: the start-up `banner`, `err_to_str` and
  `reset_reason_to_str` for `EspError` and `ResetReason` codes,
  `string_ends_with` and `random_u32`.

## Install

```
pip install .
```

## Examples

```python
from core2kit import affine, quat
from core2kit.jsonbuilder import JsonBuilder, FieldType

m = affine.translate_make([1.0, 2.0, 3.0])
q = quat.quatv(1.5707963, [0.0, 0.0, 1.0])
rotated = quat.rotatev(q, [1.0, 0.0, 0.0])

builder = JsonBuilder()
builder.add_string("name", "sensor")
builder.add_int("count", 3)
builder.add_field("values", [1.0, 2.5], FieldType.FLOAT_ARRAY_DEC2)
print(builder.serialize())
# { "name": "sensor", "count": 3, "values": [ 1.00, 2.50 ] }
```

```python
from core2kit.oled import FrameBuffer

fb = FrameBuffer()
fb.print_line("Hello World!")
raw = fb.to_bytes()  # 1024 bytes
```

## What it does not do

The package touches no hardware. `FrameBuffer` only holds pixels in
memory; sending them to a display is up to you. `translate_keys` cleans
bytes you have already read from a keyboard, and `InterruptLine` is fed
by calling `handle` or `set` yourself. There is no mounting of storage
cards, no network time synchronisation and no command-line program.

## Tests

```
pip install .[test]
pytest
```