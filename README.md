# pvrkit

`pvrkit` reads the texture and image files used for PowerVR-style rendering. It also has a few small containers. It has no third-party dependencies.

## What is in it

- **DTEX textures** (`pvrkit.dtex`)
  - `parse_dtex(data)` and `load_dtex(path)` return a `DtexImage`.
  - `parse_header(data)` returns a `DtexHeader`. Its properties `twiddled`, `compressed`, `mipmapped` and `pixel_format` decode the type flags.
  - `decode_formats(header)` returns a `DtexFormats`. Compressed textures get only an internal format. Uncompressed ones also get a transfer format and transfer type.
  - `vq_internal_format(header)` gives the VQ internal format of a compressed texture.
- **DTEX upload formats** (`pvrkit.dtex_upload`): `upload_format(header)` returns an `UploadFormat` holding `format`, `internal_format` and `type`. The lookup is keyed on the header's compressed, twiddled and mipmapped flags.
- **PVR textures** (`pvrkit.pvr`)
  - `parse_pvr(data)` and `load_pvr(path)` return a `PvrTexture` with `width`, `height`, `format`, `data` and `compressed`.
  - `texture_width`, `texture_height` and `texture_format` read the 32-byte header.
  - `mipmap_level_count(width, height)` and `mipmap_data_size(width, height)` size a chain of 16-bit mipmap levels.
- **24-bit BMP images** (`pvrkit.bmp`): `parse_bmp(data)` and `load_bmp(path)` return a `BmpImage` (`width`, `height`, `data`). The pixels are converted from BGR to RGB order. Rows are read as tightly packed, three bytes per pixel, from the pixel-data offset in the file header.
- **Format constants** (`pvrkit.constants`)
  - The `KosEnum` values cover the vendor texture formats and extensions.
  - `shared_texture_palette(index)` gives the target for shared palettes 0 to 63.
- **Scene data**
  - `pvrkit.world` reads the triangle world text format with `parse_world(lines)` and `load_world(path)`. It returns a list of `Triangle`, each holding three `Vertex` values (`x`, `y`, `z`, `u`, `v`).
  - `pvrkit.cubes` holds the state of a field of bouncing cubes.
    - `CubeField` has the methods `add`, `update` and `populate`.
    - `Cube` is a single cube.
    - `scale_factors(count)`, `face_colors()` and `random_between(rng, low, high)` are helpers.
- **Containers**
  - `pvrkit.aligned_vector.AlignedVector` is a vector of fixed-size binary elements whose capacity grows in chunks of 256.
  - `pvrkit.named_array.NamedArray` is a fixed number of zero-filled byte slots, addressed by id.
  - `pvrkit.stack.Stack` is a bounded stack. It raises `StackFullError` when it is full.

Bad input raises `DtexError`, `PvrError`, `BmpError` or `WorldError`. All of these are subclasses of `ValueError`.

## Installing

```
pip install .
```

## Examples

Read a DTEX texture:

```python
from pvrkit.dtex import load_dtex

image = load_dtex("texture.dtex")
print(image.width, image.height, hex(image.formats.internal_format))
```

Read a PVR texture:

```python
from pvrkit.pvr import load_pvr

texture = load_pvr("glass.pvr")
print(texture.width, texture.height, hex(texture.format))
```

Read a BMP image:

```python
from pvrkit.bmp import load_bmp

bmp = load_bmp("brick.bmp")
print(bmp.width, bmp.height, len(bmp.data))
```

Take a slot from a `NamedArray`:

```python
from pvrkit.named_array import NamedArray

names = NamedArray(element_size=16, max_element_count=32)
taken = names.alloc()  # (id, bytearray) or None when every slot is in use
```

## What it does not do

`pvrkit` only reads files and keeps state. It does not do any of the following:

- render anything or upload textures to a graphics device;
- open a window or read input;
- decompress VQ data or untwiddle pixel data;
- provide a command-line tool.

The upload formats it works out are plain integers. They are meant to be passed to whatever graphics API you use.

## Running the tests

```
pip install ".[test]"
pytest
```