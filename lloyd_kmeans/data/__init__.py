from .dataset import load_points

__all__ = ["load_points"]
