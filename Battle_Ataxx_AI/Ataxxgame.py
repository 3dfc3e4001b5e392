"""Game loop and turn management for a single Ataxx game."""

from .Board import BLUE, EMPTY, RED, Board
from .Move import Move


class Ataxxgame:
    def __init__(self, red_player, blue_player, blocks=(), logger=print, renderer=None):
        self.board = Board()
        self.players = {RED: red_player, BLUE: blue_player}
        self.blocks = list(blocks)
        self.logger = logger
        self.renderer = renderer

    def play(self):
        """Run a single game. Returns RED, BLUE, or EMPTY (draw)."""
        for square in self.blocks:
            self.board.set_block(square)
        if self.renderer:
            self.board.set_notifier(self.renderer)

        game_result = self.board.winner
        while game_result is None:
            color = self.board.whose_move
            player = self.players[color]
            try:
                move = player.next_move(self.board)
                if isinstance(move, str):
                    move = Move.parse(move)
                self.board.make_move(move)
            except ValueError as exc:
                self.logger(f"Disqualification: {color} - {exc}")
                game_result = color.opposite()
                break

            self.logger(f"Move {self.board.num_moves}: {color} {move}")
            game_result = self.board.winner

        if game_result is EMPTY:
            self.logger(f"Result: Draw ({self.board.red_pieces}-{self.board.blue_pieces})")
        else:
            self.logger(f"Winner: {game_result} ({self.board.red_pieces}-{self.board.blue_pieces})")
        return game_result
