from rushhour.engine.locator.locator import far_end, find_vehicle

__all__ = ["far_end", "find_vehicle"]
