from backend.engine.moveresolver.resolver import DIRECTION_ORDER, MoveResolver, TileMove

__all__ = ["DIRECTION_ORDER", "MoveResolver", "TileMove"]
