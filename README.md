# diffblend

diffblend builds a "difference trail" from a sequence of images that all have
the same size. It compares each pair of consecutive frames and gathers the
changes into one RGBA result image on an opaque black background. The result
shows where something moved or changed over the whole sequence.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install .[test]
pytest
```

## Blend modes

`diffblend.blender.BlendMode` lists the algorithms:

| Mode | Name            | Function                         | What it produces                                                               |
|------|-----------------|----------------------------------|--------------------------------------------------------------------------------|
| 0    | `TRAIL`         | `difference_blend_trail`         | Per channel, the largest absolute difference between consecutive frames        |
| 1    | `TRAIL_V2`      | `difference_blend_trail_v2`      | The same result as mode 0                                                      |
| 2    | `TRAIL_V3`      | `difference_blend_trail_v3`      | White where the largest channel difference exceeds the threshold               |
| 3    | `TRAIL_V4`      | `difference_blend_trail_v4`      | White where the weighted-luminance difference exceeds the threshold            |
| 4    | `TRAIL_V4_FAST` | `difference_blend_trail_v4_fast` | The newer frame's pixel where the mean-of-RGB difference exceeds the threshold |

Notes:

- In every mode, if any image's size differs from the first image's size, a
  warning is logged and the plain black canvas comes back.
- An empty image list raises `ValueError`.
- Modes 0 and 1 ignore the threshold. When called directly, the thresholded
  functions default to 60 (mode 2) and 15 (modes 3 and 4). `blend()`, `Mediator`
  and the command line default to 30.
- Lower thresholds react to smaller changes and also pick up more noise.
- Each function logs its running time at `DEBUG` level.

## Command line

```
diffblend frame1.png frame2.png frame3.png --mode 4 --threshold 30 --output result.png
```

The arguments are:

- `images`: one or more image files or `file:` URLs, in frame order. Files
  that cannot be read are skipped.
- `-m`, `--mode`: the blend mode, 0–4. The default is 4.
- `-t`, `--threshold`: the change threshold. The default is 30.
- `-o`, `--output`: where the result is written. The default is `result.png`.
  The format follows the file extension.
- `-v`, `--verbose`: log timings and skipped files.

The exit status is 1 when no image can be loaded or the output cannot be
written. Otherwise it is 0.

## Library

```python
from diffblend.blender import BlendMode, blend, difference_blend_trail_v4_fast
from diffblend.mediator import Mediator

mediator = Mediator(threshold=30)
count = mediator.load_images(["a.png", "b.png", "c.png"])  # number loaded
mediator.set_threshold(20)
result = mediator.process(BlendMode.TRAIL_V4_FAST)          # a PIL RGBA image
result.save("result.png")
```

- `Mediator.load_images` replaces the buffer with the images it could read.
  It accepts paths and `file:` URLs and skips unreadable files.
- `Mediator.images` holds the frames as a tuple.
- `Mediator.process` raises `ValueError` when the buffer is empty or the mode
  is unknown.

The functions in `diffblend.blender` take a sequence of PIL images and return
a new RGBA image. `blend(images, mode, threshold)` runs the algorithm that
`mode` selects.

## What it does not do

diffblend works only on image files you give it. It does not capture frames
live from the screen or from other windows. It has no graphical viewer or
drag-and-drop area. You open the result with whatever image viewer you like.