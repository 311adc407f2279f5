# noisekit

noisekit provides building blocks for procedural noise work in Python:

- **Permutation tables** (`noisekit.permutation`). `PermutationTable(seed)` is a
  shuffled, deterministic table of the values 0..255. It is built with a small
  xorshift generator, `XorShiftRng`. The `get1` to `get4` methods hash
  integer lattice coordinates in one to four dimensions. `PermutationTable.from_rng(rng)`
  builds a table from an existing generator.
- **Point transformers** (`noisekit.transformers`). These wrap any noise source
  that has a `get(point)` method and change the input point before the lookup:
  - `TranslatePoint` adds a translation on each axis.
  - `ScalePoint` multiplies each axis by a factor.
  - `RotatePoint` rotates 2-D and 3-D points. The angles are in degrees.
  - `Displace` offsets each coordinate by the value of its own noise source.
- **Noise maps** (`noisekit.noise_map`). `NoiseMap` is a 2-D grid of floats.
  Reads outside the grid return the border value.
- **Map builders** (`noisekit.noise_map_builder`). These sample a 3-D noise
  source into a `NoiseMap`:
  - `PlaneMapBuilder` samples the plane z = 0. It can also sample seamlessly, so that the map tiles.
  - `CylinderMapBuilder` samples a cylinder.
  - `SphereMapBuilder` samples a region given by latitude and longitude.
- **Colour gradients** (`noisekit.color_gradient`). `ColorGradient` maps values
  to RGBA colours by interpolating between control points. It has built-in
  grayscale, terrain and rainbow gradients. The module also has the helpers
  `blend_channels` and `linerp_color`.
- **Images and rendering** (`noisekit.noise_image`, `noisekit.image_renderer`).
  `NoiseImage` is a 2-D grid of RGBA colours. `ImageRenderer` renders a `NoiseMap` into a
  `NoiseImage` through a gradient. It can add hill shading from a `LightSource`,
  can wrap at the edges, and can blend over a background image.

## Installing

```
pip install .
```

noisekit requires Pillow, which it uses to save maps and images as image files.

## A quick tour

Any object with a `get(point)` method can act as a noise source. The method takes
a tuple of floats and returns a float:

```python
import math

from noisekit.color_gradient import ColorGradient
from noisekit.image_renderer import ImageRenderer
from noisekit.noise_map_builder import PlaneMapBuilder
from noisekit.transformers.scale_point import ScalePoint


class Waves:
    def get(self, point):
        x, y, *_ = point
        return math.sin(x * 3.0) * math.cos(y * 3.0)


source = ScalePoint(Waves()).set_scale(2.0)

noise_map = (
    PlaneMapBuilder(source)
    .set_size(256, 256)
    .set_x_bounds(-2.0, 2.0)
    .set_y_bounds(-2.0, 2.0)
    .build()
)

renderer = ImageRenderer().set_gradient(ColorGradient().build_terrain_gradient())
renderer.enable_light()
image = renderer.render(noise_map)

noise_map.write_to_file("waves_gray.png")   # written to example_images/
image.write_to_file("waves_terrain.png")
```

`write_to_file` creates `example_images/` in the current directory if it does
not exist, and returns the path it wrote. A noise map is saved in grayscale,
with values from -1 to 1 mapped to 0 to 255. An image is saved as RGBA.

### Permutation tables

```python
from noisekit.permutation import PermutationTable

table = PermutationTable(42)
table.get3((1, -2, 7))   # an int in 0..255, the same every time for seed 42
```

### Colour gradients

```python
from noisekit.color_gradient import ColorGradient

gradient = (
    ColorGradient()
    .clear_gradient()
    .add_gradient_point(0.0, (0, 0, 0, 0))
    .add_gradient_point(1.0, (255, 255, 255, 255))
)
gradient.get_color(0.5)   # (127, 127, 127, 127)
```

## Errors

The package raises exceptions in these cases:

- `set_value` raises `IndexError` when the point is outside a map or an image.
- A map or image size of 32767 or more in either dimension raises `ValueError`.
- Colours must have four channels, each in 0..255. Anything else raises `ValueError`.
- `get_color` raises `ValueError` when the gradient has fewer than two points.
- `LightSource.set_contrast` raises `ValueError` when the contrast is negative.
- Transformers raise `ValueError` for points that do not have 2, 3 or 4 coordinates.
- `RotatePoint` raises `ValueError` for 4-D points.
- `Displace` raises `ValueError` when a displacement source needed for the point's dimension is missing.
- `CylinderMapBuilder` swaps reversed angle or height bounds and issues a warning.

## What it does not do

noisekit contains no noise generators of its own. There is no Perlin, simplex,
value or Worley noise, and no fractal or turbulence functions. You must supply
the noise source yourself, as any object with a `get(point)` method. There is also no
command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```