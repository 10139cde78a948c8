from fifteen.engine.gamegenerator.generator import DEFAULT_SHUFFLES, GameGenerator

__all__ = ["DEFAULT_SHUFFLES", "GameGenerator"]
