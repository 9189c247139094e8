"""Entity-component-system 3D scene engine: vectors, matrix maths, OBJ meshes, cameras and camera control."""

__version__ = "0.1.0"

__all__ = ["ecs", "vectors", "mathutils", "renderer", "components", "mesh", "game"]