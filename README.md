# squeezekit

Metering building blocks for an audio compressor. It has meter
ballistics, a multi-channel level meter, and toolkit-free models of the
widgets that display those levels.

The package depends on no GUI library. The widget classes keep only the
state that decides what a meter shows: geometry, brightness, peak markers,
needle position and label state. Drawing that state is left to your front
end.

## Installation

```
pip install squeezekit
```

Only the Python standard library is needed (Python 3.10 or later).

## Modules

### `squeezekit.ballistics`

- `decibel(level)` converts a linear level to decibels. Levels of zero or
  below give `-inf`.
- `log_meter_ballistics(inertia, time_passed, level, readout)` moves a
  readout towards `level` on a logarithmic curve. After `inertia` seconds
  it has covered 99 % of the distance. A non-positive `inertia` raises
  `ValueError`.
- `MeterBallistics(buffer_length=0.050)` handles meters that update once
  per buffer.
  - `peak(current, state)` updates a `PeakState` (`level`, `mark`,
    `hold_time`). The reading rises at once. Levels at or above 0 dB are
    clipped to 0 dB. When the level drops, the reading falls linearly at
    26 dB per 3 seconds. The peak mark is held for 10 seconds and then
    falls at the same rate.
  - `average(current, readout)` returns the new average readout. It
    reaches 99 % of the target in 300 ms.
  - `gain_reduction_peak(current, state)` applies the same hold-and-fall
    behaviour to a gain-reduction peak. It uses only `mark` and
    `hold_time`.

### `squeezekit.level_meter`

`LevelMeter(channels, sample_rate, crest_factor=20.0)` collects one sample
frame at a time:

- `push(inputs, outputs, gain_reductions)` takes one frame, with one
  value per channel in each sequence.
- Every 50 ms of samples it updates the meters and returns `True`. Other
  calls return `False`.
- A sequence of the wrong length raises `ValueError`.

`reading(channel)` returns a frozen `ChannelReading` with these fields, all
in decibels:

- `peak_input`, `peak_output`: peak levels.
- `peak_mark_input`, `peak_mark_output`: peak marks.
- `maximum_input`, `maximum_output`: maximum levels.
- `average_input`, `average_output`: RMS levels.
- `gain_reduction`, `gain_reduction_peak`: gain reduction and its peak.

Level fields include the crest factor. The gain-reduction fields do not.
An out-of-range channel raises `IndexError`. `reset()` sets every reading
back to the meter floor, which is `minimum`, equal to
`-(70.01 + crest_factor)`.

### `squeezekit.meter_segment`

`MeterSegment(lower_threshold=-144.0, threshold_range=1.0, is_topmost=False)`
is one segment of a bar meter. Its brightness depends on the levels it
receives:

- Fully lit when the normal level reaches the upper threshold.
- Fully lit when the discrete level lies between the thresholds.
- Dark when the normal level is below the lower threshold.
- Otherwise, brightness scales with the normal level.

The peak marker lights when a peak lies between the thresholds. For a
topmost segment it lights when a peak is at or above the lower threshold.

`set_levels`, `set_normal_levels` and `set_discrete_levels` return `True`
when the segment's appearance changed. `set_thresholds` returns the new
upper threshold.

### `squeezekit.meter_bar`

`MeterBar` stacks segments:

- `add_segment(...)` appends a segment and returns it.
- `set_orientation(Orientation.…)` or `invert(bool)` re-arranges the
  segments.
- `set_segment_width(width)` changes the segment width.
- `set_levels`, `set_normal_levels` and `set_discrete_levels` update all
  segments together.
- The properties `segments`, `bounds` (a `Bounds` per segment), `size`,
  `orientation`, `is_inverted` and `segment_width` expose the layout.

### `squeezekit.needle_meter`

`NeedleMeter` maps a value from 0 to 1 to a needle position. The meter is
vertical when it is taller than it is wide.

- `resize` and `set_images` (which takes image sizes) set the travel path.
- `set_value` returns `True` when the needle moved.
- `needle_origin` gives the corner at which the needle is drawn.

### `squeezekit.channel_slider`

`ChannelSlider(channels)` selects one channel or all of them (value `-1`).

- `text_from_value` shows the value as `"All"` or a one-based channel
  number. `value_from_text` converts that text back.
- `normalised()` scales the value to the range 0 to 1.

### `squeezekit.state_label`

`StateLabel` switches between `LabelState.OFF`, `ON` and `ACTIVE`. Each
state selects a background image, and `ON` and `ACTIVE` also select a text
colour.

`set_images` takes:

- three images of equal size, given as `(width, height)` pairs or objects
  with a `size` attribute;
- two text colours as `rrggbb` hex strings;
- the spacing and the font size.

Images of different sizes or a malformed colour raise `ValueError`.

### `squeezekit.skin_list`

`SkinList.fill(directory)` lists the `*.skin` files in a directory. The
match ignores case and the list is sorted by name.

The list also tracks a default skin:

- The default skin's name is read from `default_skin.ini`.
- If that file does not exist, it is created containing `Default`.
- `set_default(row)` writes the chosen name back as UTF-16. It returns
  `False` for an invalid row.
- `row(name)` returns `None` for an unknown skin.
- `skin_name(row)` returns `""` for an invalid row.

## Example

```python
from squeezekit.level_meter import LevelMeter

meter = LevelMeter(channels=2, sample_rate=44100, crest_factor=20.0)
for _ in range(44100):
    meter.push([0.5, 0.25], [0.4, 0.2], [1.5, 1.5])

print(meter.reading(0))
```

```python
from squeezekit.meter_bar import MeterBar, Orientation

bar = MeterBar()
for lower in range(-60, 0, 6):
    bar.add_segment(lower, 6, lower == -6, 5, 2, 0.3, "#ff0000")
bar.set_orientation(Orientation.HORIZONTAL)
bar.set_levels(-12.0, -144.0, -3.0, -144.0)
print(bar.size, bar.bounds[0])
```

## What the package does not do

- It processes no audio. There is no compressor gain stage, side-chain
  filter or dithering. `LevelMeter` only measures the samples and gain
  reduction values you pass to it.
- It draws nothing and opens no windows. The widget classes are state
  models for a front end to render.
- It installs no command-line program.

## Running the tests

```
pip install "squeezekit[test]"
pytest
```