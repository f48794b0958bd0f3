from gazool.animation.registry import AnimatedBlock, AnimationRegistry, BlockState

__all__ = ["AnimatedBlock", "AnimationRegistry", "BlockState"]
