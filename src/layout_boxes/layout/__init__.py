from .split import BoxHorizontalSplit, BoxVerticalSplit

__all__ = ["BoxHorizontalSplit", "BoxVerticalSplit"]
