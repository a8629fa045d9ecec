from rushhour.engine.mover.axis import slide_vertical
from rushhour.engine.mover.slide import slide

__all__ = ["slide", "slide_vertical"]
