from .frame_loop import FrameScheduler
from .scene import Scene

__all__ = ["FrameScheduler", "Scene"]
