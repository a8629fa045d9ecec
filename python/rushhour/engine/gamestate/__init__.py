from rushhour.engine.gamestate.state import GameState

__all__ = ["GameState"]
