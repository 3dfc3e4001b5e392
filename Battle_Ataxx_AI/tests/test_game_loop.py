"""Tests for Ataxxgame turn handling and end-of-game state."""

from Battle_Ataxx_AI.Ataxxgame import Ataxxgame
from Battle_Ataxx_AI.Board import BLOCKED, BLUE, EMPTY, RED
from Battle_Ataxx_AI.Move import Move, PASS
from Battle_Ataxx_AI.Player import AIPlayer, GreedyPlayer, Player, RandomPlayer


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_illegal_move_disqualifies_player():
    logs = []
    game = Ataxxgame(
        red_player=SeqPlayer(RED, ["a1-a4"]),
        blue_player=SeqPlayer(BLUE, []),
        logger=logs.append,
    )
    assert game.play() is BLUE
    assert any("Disqualification" in line for line in logs)


def test_malformed_text_disqualifies_player():
    game = Ataxxgame(
        red_player=SeqPlayer(RED, ["a1-a2"]),
        blue_player=SeqPlayer(BLUE, ["nonsense"]),
        logger=lambda _: None,
    )
    assert game.play() is RED
    assert game.board.num_moves == 1


def test_jump_shuffle_ends_in_draw():
    red = ["a1-a3", "a3-a1"] * 13
    blue = ["a7-a5", "a5-a7"] * 12
    logs = []
    game = Ataxxgame(SeqPlayer(RED, red), SeqPlayer(BLUE, blue), logger=logs.append)
    assert game.play() is EMPTY
    assert game.board.num_moves == 25
    assert logs[0] == "Move 1: Red a1-a3"
    assert logs[-1].startswith("Result: Draw")


def test_blocks_placed_before_play_and_renderer_sees_moves():
    frames = []
    game = Ataxxgame(
        red_player=SeqPlayer(RED, [Move.parse("a1-a4")]),
        blue_player=SeqPlayer(BLUE, []),
        blocks=["c3"],
        logger=lambda _: None,
        renderer=frames.append,
    )
    game.play()
    assert game.board.get("e", "5") is BLOCKED
    assert frames and frames[0] is game.board


def test_random_players_finish_a_game():
    game = Ataxxgame(RandomPlayer(RED, seed=3), RandomPlayer(BLUE, seed=4), logger=lambda _: None)
    result = game.play()
    assert result in (RED, BLUE, EMPTY)
    assert game.board.winner is result


def test_ai_player_passes_when_stuck(build_board):
    b = build_board(
        red=["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"],
        blue=["a1"],
        to_move=BLUE,
    )
    assert AIPlayer(BLUE, depth=1).next_move(b) is PASS
    assert RandomPlayer(BLUE, seed=0).next_move(b) is PASS
    assert GreedyPlayer(BLUE).next_move(b) is PASS


def test_ai_player_records_search_stats():
    from Battle_Ataxx_AI.Board import Board

    player = AIPlayer(RED, depth=1)
    mv = player.next_move(Board())
    assert Board().is_legal_move(mv)
    assert player.stats[-1]["depth"] == 1


def test_greedy_player_takes_winning_capture(build_board):
    b = build_board(red=["a1", "g7"], blue=["c2"])
    mv = GreedyPlayer(RED).next_move(b)
    b.make_move(mv)
    assert b.winner is RED
