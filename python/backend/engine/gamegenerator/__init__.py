from backend.engine.gamegenerator.generator import SCRAMBLE_MOVES, GameGenerator

__all__ = ["SCRAMBLE_MOVES", "GameGenerator"]
