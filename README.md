# cframe

This package is the math and scene-object core of a small real-time 3D framework. It is
written in pure Python and has no dependencies.

## What it provides

- `cframe.vector` has the types `Vec2`, `Vec3`, `Vec4`, `Plane` and `Sphere`, and the
  helpers `dot`, `cross`, `mag`, `normalize`, `rotate`, `reflect`, `distance` and `lerp`.
  - `normalize`, division by a scalar and `Plane.normalized` raise `ZeroDivisionError`
    when the divisor is nearly zero.
  - Subtracting two `Vec4`s computes the `w` component as `other.w - self.w`.
- `cframe.matrix` has `Matrix4` and `Matrix3`. Both are column-major, laid out the way
  OpenGL expects.
  - Matrices multiply with `*`.
  - `Matrix4 * Vec4` gives a `Vec4`.
  - `Matrix4 * Vec3` treats the vector as a point (w = 1) and gives a `Vec3`.
- `cframe.transforms` has `rotate`, `translate`, `scale`, `perspective`, `viewport_ndc`,
  `orthographic`, `un_ortho`, `look_at`, `transpose`, `inverse` and `remove_translation`.
  `inverse` raises `ZeroDivisionError` for a (nearly) singular matrix.
- `cframe.camera` has `Camera`. It holds a projection, a position and a rotation. Its
  view is `rotation * position`.
- `cframe.objloader` has `parse_obj` and `load_obj`. They read triangulated Wavefront OBJ
  data (`v`, `vt`, `vn`, and `f` with `v/vt/vn` corners) into `MeshData`.
  - Texture `v` coordinates are negated.
  - Other keywords are skipped.
  - Malformed lines and out-of-range indices raise `ObjParseError`.
- `cframe.gameobject`, `cframe.light`, `cframe.celestial` and `cframe.particles` hold scene
  objects that keep their model matrices up to date:
  - `GameObject`.
  - `Light`, together with `light_uniforms`.
  - `CelestialBody`, which spins and orbits, and `Moon`.
  - `ParticleFountain`, whose particle clock loops every life span.
- `cframe.trackball` has `Trackball`, which turns mouse drags into rotation matrices.
  - It is fed through `handle_event` with `TrackballEvent`s that use the `EventType` and
    `Key` enums.
  - Holding left Ctrl locks rotation about the y axis.
  - Holding left Shift locks rotation about the x axis.
- `cframe.timer` has `Timer`. It is a millisecond frame timer with an injectable clock.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from cframe.vector import Vec3
from cframe import transforms
from cframe.camera import Camera

model = transforms.translate(Vec3(0.0, 0.0, -10.0)) * transforms.rotate(45.0, Vec3(0.0, 1.0, 0.0))
camera = Camera()
mvp = camera.projection * camera.view_matrix() * model
print(mvp)
```

```python
from cframe.objloader import load_obj

mesh = load_obj("cube.obj")
print(len(mesh.vertices), len(mesh.normals), len(mesh.uv_coords))
```

```python
from cframe.celestial import Axis, CelestialBody

sun = CelestialBody()
earth = CelestialBody()
earth.set_rotation(360.0, Vec3(0.0, 0.0, 1.0))
earth.set_revolution(360.0 / 365.0, Axis.Z, sun, 9.0)
earth.update(1.0)
print(earth.position)
```

`CelestialBody.set_revolution` accepts an eliptical proportion, but it leaves the body's
`eliptical_proportion` as it was. Set that attribute directly if you want an elliptic
orbit.

## What it does not do

This package computes transforms and object state only. It does not:

- open a window;
- compile shaders;
- load textures or images;
- upload meshes to a GPU;
- draw anything.

The `mesh`, `shader`, `texture` and `env_map` values that scene objects carry are stored
and never used. There is no scene manager or main loop, and no command to run. It also
writes no log files.