# minycraft

A small voxel terrain sandbox. The world is a square grid of 16×16 chunks.
Each chunk takes its heightmap from two-octave Perlin noise. Neighbouring
chunks are blended along their edges, so the terrain carries on across chunk
borders. Only the surface of the terrain is turned into a cube mesh. That mesh
is textured from a 16×16-tile atlas and drawn with OpenGL through pyglet.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
minycraft
```

This opens a 1280×720 window titled "Minycraft" that shows a 6×6 grid of
chunks. The current frame rate is printed to standard output on every frame.

Options (see `minycraft --help`):

- `--title TEXT`: window title.
- `--width N`, `--height N`: window size in pixels. Both must be positive.
- `--fps N`: frame rate cap, 60 by default. A frame that finishes early sleeps
  for half of the time it has left.
- `--shader-dir PATH`: directory that holds `vertex.shader` and
  `fragment.shader`. The default is `src/Shaders`.
- `--atlas PATH`: the texture atlas image. The default is `Textures/atlas.png`.
- `--quiet`: do not print the frame rate.

The command exits with status 1 if the window cannot be created or if a shader
or the atlas cannot be loaded, compiled or linked.

### Shaders and atlas

The package ships no shader files and no texture atlas. You supply them, at
the default paths relative to the working directory or at the paths given with
the options above. The renderer expects:

- vertex attribute 0: the position (`vec3`);
- vertex attribute 1: the atlas texture coordinate (`vec2`);
- a `uniform mat4 mvp` holding projection × view × model;
- an atlas laid out as 16×16 tiles. The terrain uses the tiles in row 1: the
  sides take the first tile, the top the second and the bottom the third.

### Controls

- Hold the **right mouse button** to capture the cursor and look around.
- While the button is held, **W / S** fly forward and back along the view
  direction, and **A / D** strafe left and right.
- Release the button to free the cursor again.

## Using the pieces as a library

The terrain code needs no OpenGL, so you can use it without a window:

```python
from minycraft.chunk import PerlinNoise, Chunk
from minycraft.world import World

noise = PerlinNoise(2)
chunk = Chunk(0, 0, noise)
chunk.generate_mesh()
print(len(chunk.vertices), len(chunk.indices), len(chunk.tex_coords))

world = World(6, noise)  # 6×6 chunks, blended and meshed
```

Modules:

- `minycraft.chunk`: `PerlinNoise` (`noise2d`, `octave2d`, `octave2d_01`) and
  `Chunk`, which holds a `height_map` and builds `vertices`, `indices` and
  `tex_coords` with `generate_mesh()`.
- `minycraft.world`: `World(view_distance, noise)` creates the chunks, runs
  `blend_chunks()` twice and then meshes every chunk.
- `minycraft.shapes`: cube vertices and indices, plus
  `cube_tex_coords(tex_count)`, which gives the UVs for a cube with 1, 2 or 3
  distinct tiles. Any other count gives an empty list.
- `minycraft.block`: `Block(position, atlas_position, tex_count)`, a cube moved
  to a position, with its UVs mapped into the atlas.
- `minycraft.camera`: `SceneCamera` (`move`, `view_matrix`), plus `look_at`,
  `perspective` and `translation` for building 4×4 matrices.
- `minycraft.events`: `InputState` tracks key and mouse state and runs the
  functions bound with `bind_key` and `bind_button`. `CursorMode` names the
  cursor modes.
- `minycraft.timing`: `FrameClock.tick(now)` returns the time since the last
  tick and adds up the elapsed time.
- `minycraft.buffers`: `pack_attributes` and `pack_indices` lay out mesh data.
  `VertexBuffer` and `ElementBuffer` upload that data to OpenGL.
- `minycraft.shaders`: `read_shader_source`, `Shader`, `ShaderProgram` and
  `ShaderError`.
- `minycraft.texture`: `Texture`, `pixel_format` and `TextureError`.
- `minycraft.debug`: `format_debug_message`, `check_gl_error` and `GLError`,
  for reporting OpenGL debug messages and error codes.
- `minycraft.renderer`: `model_view_projection` and `ChunkRenderer`, which
  draws one chunk.
- `minycraft.log`: `get_engine_logger()` and `get_client_logger()`.

## What it does not do

- The world is a fixed grid of chunks, built once at start-up. No new chunks
  load as the camera moves.
- The noise seed is fixed, so every run produces the same terrain.
- Blocks cannot be placed or removed, and nothing is saved to disk.
- There is no player physics or collision. The camera flies freely.