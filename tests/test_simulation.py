import unittest
import logging
from minimax_playground.algorithms.Minimax import Minimax
from minimax_playground.algorithms.RandomAgent import RandomAgent
from minimax_playground.games.tic_tac_toe import TicTacToeState
from minimax_playground.simulation import simulate_game, benchmark
from minimax_playground.evaluation import StandardWinLossTieEvaluator
from minimax_playground.errors import NoLegalMoveError
from minimax_playground.types import Player


def center_and_corner() -> TicTacToeState:
    # X in the center, O in a corner: a drawn position with a small tree
    return TicTacToeState([[-1, 0, 0], [0, 1, 0], [0, 0, 0]])


class TestSelfPlay(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        players = {Player.MAXIMIZER: Minimax(), Player.MINIMIZER: Minimax()}
        cls.first = simulate_game(TicTacToeState(), players)
        cls.second = simulate_game(TicTacToeState(), players)

    def test_self_play_draws(self):
        self.assertEqual(len(self.first.moves), 9)
        self.assertIsNone(self.first.winner)
        self.assertEqual(self.first.score, 0.0)
        self.assertTrue(self.first.final_state.is_terminal())
        self.assertEqual(self.first.initial_state, TicTacToeState())

    def test_self_play_is_reproducible(self):
        self.assertEqual(self.first.moves, self.second.moves)
        self.assertEqual(self.first.final_state, self.second.final_state)

    def test_moves_replay_to_final_state(self):
        state = self.first.initial_state
        for move in self.first.moves:
            state = state.apply(move)
        self.assertEqual(state, self.first.final_state)


class TestSimulateGame(unittest.TestCase):
    def test_requires_both_players(self):
        with self.assertRaises(ValueError):
            simulate_game(TicTacToeState(), {Player.MAXIMIZER: Minimax()})

    def test_winner_from_final_state(self):
        # X completes the top row at once
        state = TicTacToeState([[1, 1, 0], [-1, -1, 0], [0, 0, 0]])
        record = simulate_game(state, {Player.MAXIMIZER: Minimax(), Player.MINIMIZER: RandomAgent(seed=0)})
        self.assertEqual(record.moves, [(0, 2)])
        self.assertEqual(record.winner, Player.MAXIMIZER)
        self.assertEqual(record.score, 9.0)

    def test_already_terminal(self):
        state = TicTacToeState([[1, 1, 1], [-1, -1, 0], [0, 0, 0]])
        record = simulate_game(state, {Player.MAXIMIZER: Minimax(), Player.MINIMIZER: Minimax()})
        self.assertEqual(record.moves, [])
        self.assertEqual(record.winner, Player.MAXIMIZER)

    def test_random_agent_is_reproducible(self):
        players_a = {Player.MAXIMIZER: RandomAgent(seed=7), Player.MINIMIZER: RandomAgent(seed=8)}
        players_b = {Player.MAXIMIZER: RandomAgent(seed=7), Player.MINIMIZER: RandomAgent(seed=8)}
        self.assertEqual(
            simulate_game(TicTacToeState(), players_a).moves,
            simulate_game(TicTacToeState(), players_b).moves,
        )

    def test_random_agent_without_moves(self):
        with self.assertRaises(NoLegalMoveError):
            RandomAgent(seed=0)(TicTacToeState([[1, 1, 1], [-1, -1, 0], [0, 0, 0]]))


class TestBenchmark(unittest.TestCase):
    def test_minimax_never_loses_to_random(self):
        results = benchmark(center_and_corner, Minimax(), {"random": RandomAgent(seed=1)}, num_games=6)
        self.assertEqual(list(results), ["random"])
        self.assertEqual(len(results["random"]), 6)
        self.assertTrue(all(reward in (0.0, 1.0) for reward in results["random"]))

    def test_evaluator_statistics(self):
        evaluator = StandardWinLossTieEvaluator(
            initial_state_creator=center_and_corner,
            opponents={"minimax": Minimax(), "random": RandomAgent(seed=2)},
            num_games=4,
        )
        results = evaluator(Minimax())
        self.assertEqual(results["minimax"], {
            "mean": 0.0,
            "std": 0.0,
            "win_rate": 0.0,
            "loss_rate": 0.0,
            "tie_rate": 1.0,
        })
        random_stats = results["random"]
        self.assertEqual(random_stats["loss_rate"], 0.0)
        self.assertAlmostEqual(random_stats["win_rate"] + random_stats["tie_rate"], 1.0)
        self.assertGreaterEqual(random_stats["mean"], 0.0)

    def test_evaluator_passes_logger_to_benchmark(self):
        evaluator = StandardWinLossTieEvaluator(center_and_corner, {"random": RandomAgent(seed=3)}, num_games=2)
        logger = logging.getLogger("test_simulation.evaluator")
        with self.assertLogs(logger, level=logging.DEBUG) as logs:
            evaluator(Minimax(), logger)
        self.assertTrue(any("game 2 of 2 against random" in line for line in logs.output))

    def test_evaluator_rejects_no_games(self):
        with self.assertRaises(ValueError):
            StandardWinLossTieEvaluator(center_and_corner, {"random": RandomAgent()}, num_games=0)


if __name__ == '__main__':
    unittest.main()
