# sgview

`sgview` reads scene graph command files and works with the scene they
describe. A scene is a tree of groups, transforms (scale, rotate, translate)
and leaves. Each leaf names a mesh instance and may carry a material, a light
and a texture.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
sgview [-d] [-f <command-file>]
```

* `-f <command-file>` selects the scene command file to load. Without it, the
  default is `scenegraphmodels/courtyard-scene-commands.txt`.
* `-d` turns on debug messages. They are printed with a `DEBUG:` prefix.

While reading the file the command prints a `Read ...` line for each command
it meets. It then prints the structure of the scene as an indented tree. For
the example file below:

```
Scene Graph Structure:
- root
   - box-scale
      - box
```

If the file cannot be read or holds an error, the message is printed to
standard error as `Error: <message>` and the exit status is 1.

## Scene command files

A command file is a sequence of whitespace-separated commands. Anything after
a `#` on a line is a comment.

```
instance box models/box.obj
image checker textures/checker.ppm

material mat-box
ambient 0.2 0.2 0.2
diffuse 0.8 0.1 0.1
specular 1 1 1
shininess 50
end-material

light lamp
ambient 0.3 0.3 0.3
diffuse 0.8 0.8 0.8
specular 0.8 0.8 0.8
position 0 100 0
end-light

group node-root root
scale node-scale box-scale 50 50 50
leaf node-box box instanceof box
assign-material node-box mat-box
assign-light node-box lamp
assign-texture node-box checker
add-child node-box node-scale
add-child node-scale node-root
assign-root node-root
```

Supported commands:

| Command | Arguments |
| --- | --- |
| `instance` | mesh name, path to mesh file (the path is recorded) |
| `image` | texture name, path to an ASCII PPM (P3) file (loaded at once) |
| `group` | variable, node name |
| `leaf` | variable, node name, `instanceof`, mesh name |
| `scale` | variable, node name, sx sy sz |
| `translate` | variable, node name, tx ty tz |
| `rotate` | variable, node name, angle in degrees, axis x y z |
| `material` ... `end-material` | name, then `ambient`, `diffuse`, `specular`, `emission`, `shininess` |
| `light` ... `end-light` | name, then `ambient`, `diffuse`, `specular`, `position`, `spot-direction`, `spot-angle` |
| `copy` | new variable, variable to copy (a deep copy) |
| `import` | variable, path of another command file whose root becomes this variable |
| `assign-material` | leaf variable, material name |
| `assign-light` | leaf variable, light name |
| `assign-texture` | leaf variable, texture name |
| `add-child` | child variable, parent variable |
| `assign-root` | variable |

An unknown command, an `assign-root` naming an unknown variable, a missing
image file, or a file that never assigns a root is an error. Transform nodes
take a single child; adding a second one raises `ValueError`.

## Library

* `sgview.importer`: `ScenegraphImporter` with `parse(source)` (a string or a
  text stream) and `parse_file(path)`, which build a `Scenegraph`, and
  `strip_comments(text)`.
* `sgview.scenegraph`: `Scenegraph`, holding `root`, `nodes`, `meshes`,
  `images`, `mesh_paths` and `image_paths`, with `set_root`, `add_node`,
  `dispose`, and `lights_in_view_space(view_matrix)`, which collects every
  light with a non-zero colour term and moves it into view coordinates.
* `sgview.nodes`: the node classes `GroupNode`, `TransformNode`,
  `ScaleTransform`, `RotateTransform`, `TranslateTransform` and `LeafNode`
  (each with `find`, `clone` and `accept`), the `SGNodeVisitor` base class,
  and the 4x4 matrix helpers `scale_matrix`, `translate_matrix` and
  `rotate_matrix` (angle in radians).
* `sgview.text_renderer`: `TextRenderer`, and `render_text(root)`, which
  returns the indented tree shown above.
* `sgview.exporter`: `ScenegraphExporter`, and
  `export_scenegraph(root, mesh_paths)`, which writes a scene back out as
  commands, naming nodes `node-<level>-<index>`. Plain `TransformNode`s, which
  have no command of their own, are skipped.
* `sgview.lighting`: the `Material` and `Light` dataclasses; `Light` has
  `set_position`, `set_direction`, `set_spot_direction`, `is_active` and
  `transformed(matrix)`.
* `sgview.ppm`: `parse_ppm(text, name)` and `load_ppm(path, name)` read ASCII
  PPM images into a `TextureImage`, bottom row first.
* `sgview.camera`: `TrackballCamera`, an orbit camera driven by
  `set_button` and `move_cursor`, with `adjust_rotation`, `reset`,
  `eye_position` and `view_matrix`; and `look_at(eye, target, up)`.
* `sgview.vertex_attrib`: `VertexAttrib`, per-vertex position, normal and
  texture coordinates.
* `sgview.logger`: `Logger`, with `print` and an optional `debug_print`.

## What it does not do

`sgview` does not open a window or draw the scene: there is no OpenGL
display, and the trackball camera is state only, with nothing feeding it mouse
events. Mesh files named by `instance` are not read; only their paths are
kept, so `Scenegraph.meshes` stays empty.