from .canvas import Canvas, GLCanvas, hsla
from .pipeline import RenderPipeline
from .surface import SurfaceMetrics, SurfaceSizer

__all__ = [
    "Canvas",
    "GLCanvas",
    "hsla",
    "RenderPipeline",
    "SurfaceMetrics",
    "SurfaceSizer",
]
