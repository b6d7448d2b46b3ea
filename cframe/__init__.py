"""Vector and matrix math, transforms, camera, OBJ loading, trackball, timer and scene objects for real-time 3D."""

__version__ = "1.0.4"