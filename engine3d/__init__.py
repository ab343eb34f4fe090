"""Core of a small 3D engine: vector, matrix and quaternion math, colours, meshes, a camera, input state and an application state machine."""

__version__ = "0.1.0"