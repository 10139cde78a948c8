from fifteen.models.board import GOAL, MOVE_ORDER, SIZE, Board, Direction

__all__ = ["GOAL", "MOVE_ORDER", "SIZE", "Board", "Direction"]
