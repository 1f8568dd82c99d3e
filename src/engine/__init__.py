from .animation_scheduler import AnimationScheduler

__all__ = ["AnimationScheduler"]
