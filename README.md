# hexmapper

A hex tile map with A* path finding, and the pieces needed to place it in a
3D scene: vectors, 4x4 matrices, projections, a camera, meshes, renderables,
scenes, windows and an application object that sends input to the topmost
window.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Hex maps

`hexmapper.hexmap.HexMap` is a square grid of `HexTile`s in offset
coordinates. By default it is 25 × 25, and you can pass `dimensions` to change
that. Every odd row is shifted by half a tile. Each tile holds a `resource_id`
and a tint `color`, which is a `Vec3` and starts white.

- `tile(x, y)` returns the tile. It raises `IndexError` outside the map.
- `set_tile(x, y, resource_id)` changes a tile's resource.
- `clear(resource_id)` resets every tile's resource and makes every tint
  white.
- `set_color(x, y, color)` tints a tile. Coordinates outside the map are
  ignored.
- `tile_cost(x, y)` gives the cost of entering a tile. Resources 1 and 2 cost
  1 and resource 11 costs 10. For any other resource, or outside the map, it
  returns `None`, meaning the tile cannot be entered.
- `world_position(x, y)` gives the world-space centre of a hex.
- `closest_hex(x, y)` gives the hex nearest a world point.
- `mouse_moved(x, y)` sets `highlight` to the hex under the pointer. While a
  tile is highlighted, `tile_tint(x, y)` returns its colour brightened by 0.25.
  `set_active_tile(resource_id)` changes the highlighted tile and returns
  `False` when nothing is highlighted. `clear_focus()` removes the highlight.
- `mouse_clicked(x, y)` returns the clicked hex. It also calls the `on_click`
  callback given to the constructor, if there is one.

`hex_distance(x1, y1, x2, y2)` counts the steps between two tiles.

## Path finding

```python
from hexmapper.hexmap import HexMap, hex_distance
from hexmapper.astar import AStarSolver, hex_neighbors

grid = HexMap()
grid.clear(1)                 # resource 1: passable, cost 1
grid.set_tile(3, 2, 0)        # resource 0: impassable

solver = AStarSolver()
path = solver.solve(grid, 0, 0, 5, 4)   # [(0, 0), ..., (5, 4)], or [] if unreachable

solver.render_debug(grid)     # visited tiles blue to red by score, queued grey, path green
solver.clear_debug(grid)      # reset visited and queued tiles to white

print(hex_distance(0, 0, 5, 4))
print(hex_neighbors(2, 1))    # the six adjacent tiles
```

After a search, the solver keeps its `path`, `visited` and `queued` tiles.
Passing anything other than a `HexMap` raises `TypeError`.

## Maths

- `hexmapper.vector.Vec3` is an immutable 3D vector. It supports `+`, `-`, `*`
  and `/` with vectors or scalars, plus `length`, `normalized`, `dot`,
  `cross`, `project` and `angle_between`.
- `hexmapper.matrix.Mat4` is a column-major 4 × 4 matrix. Build one row by row
  with `Mat4.from_rows`. `m[c, r]` reads one element. `rows()` and
  `transpose()` are available, and `a @ b` composes two matrices so that `b`
  applies first. The module also provides `identity`, `translation`, `scaling`
  and `rotation_x`, `rotation_y` and `rotation_z`.
- `hexmapper.transforms` adds the following:
  - `rotation(angle, axis)`
  - `ortho` and `perspective` projections
  - `look_at`
  - `invert`, which returns the identity for a singular matrix
  - `invert_affine`
  - `transform_point` and `transform_direction`, with a perspective divide
  - `format_matrix` for text output

## Meshes

- `hexmapper.vertex` defines `VertexFormat`, `SimpleVertex` (position, normal,
  colour) and `UnlitVertex` (position, texture coordinate, colour). Each has a
  `pack()` that returns little-endian 32-bit floats. `format_size` gives the
  byte size of one vertex.
- `hexmapper.mesh.Mesh` checks its vertices and indices when it is built. It
  yields its `triangles()` and produces `vertex_bytes()` and `index_bytes()`,
  with indices as 16-bit unsigned integers.
- `hexmapper.icosphere.create_icosphere(level)` builds a unit sphere.
- `hexmapper.renderable.create_cube()` builds a cube with flat normals.

## Scenes, windows and the application

- `Renderable` has a position, a rotation set in degrees, a scale and a
  `world_transform()`. `CubeRenderable` and `IcoSphereRenderable` carry a
  mesh, and `HexMap` is also a renderable.
- `Scene` holds renderables. It passes `update` and mouse events on to them.
- `Camera` gives a `view()` matrix and a 60° `perspective(aspect_ratio)`.
- `SceneWindow` owns a scene and a camera:
  - Dragging by more than 5 pixels pans the camera.
  - The wheel sets a zoom level between -10 and -20, and `update` eases the
    camera towards it.
  - A press and release without a drag is passed to the scene as a click.
  - `mouse_world_position(x, y)` turns screen coordinates into a world point.
- `Application` keeps a stack of windows. It sends frames and input to the top
  one, keeps every window at its viewport size (set with `resize`), and works
  out `fps` about every five seconds.

## What it does not do

Nothing here draws anything. There is no GPU rendering, shader or texture
loading, and no real window or event loop. Meshes, tints and matrices are
plain data for whatever renderer you connect. You feed frames and input to
`Application` yourself. The package installs no command-line tool.