"""Tests for GameSession."""

import threading

import numpy as np

from connectfour.game import GameSession, Status, Placed, Continue, Won, Tied, Rejected
from connectfour.utils import Config, BoardConfig, PlayersConfig

A = [1, 2, 1, 2, 1, 2, 1]
B = [2, 1, 2, 1, 2, 1, 2]
TIE_PATTERN = np.array([A, A, B, B, A, A], dtype=np.int8)


class TestLifecycle:
    def test_not_started_rejects_drops(self):
        session = GameSession()
        assert session.status is Status.NOT_STARTED
        assert session.state is None

        result = session.drop_piece(0)
        assert not result.accepted
        assert result.status is Status.NOT_STARTED

    def test_start_uses_config(self):
        config = Config(
            board=BoardConfig(width=8, height=5),
            players=PlayersConfig(color1="blue", color2="green"),
        )
        state = GameSession(config).start_game()
        assert state.board.shape == (5, 8)
        assert [p.color for p in state.players] == ["blue", "green"]

    def test_restart_replaces_state(self):
        session = GameSession()
        first = session.start_game()
        for col in [0, 1, 0, 1, 0, 1, 0]:
            session.drop_piece(col)
        assert session.status is Status.WON

        second = session.start_game()
        assert second is not first
        assert session.status is Status.IN_PROGRESS
        assert np.all(second.board == 0)
        assert second.current == second.players[0]

    def test_restart_after_tie(self):
        session = GameSession()
        state = session.start_game()
        state.board[:] = TIE_PATTERN
        state.board[0, 0] = 0
        session.drop_piece(0)
        assert session.status is Status.TIED

        fresh = session.start_game()
        assert np.all(fresh.board == 0)
        assert fresh.current == fresh.players[0]
        assert fresh.winner is None


class TestSubscribers:
    def test_events_are_delivered_in_order(self):
        session = GameSession()
        received = []
        session.subscribe(received.append)
        session.start_game()

        session.drop_piece(3)
        session.drop_piece(99)

        assert received == [Placed(row=5, col=3, player_id=1), Continue(), Rejected()]

    def test_win_event(self):
        session = GameSession()
        received = []
        session.subscribe(received.append)
        session.start_game()
        for col in [0, 1, 0, 1, 0, 1, 0]:
            session.drop_piece(col)

        assert received[-1] == Won(player_id=1, row=2, col=0)

    def test_unsubscribe(self):
        session = GameSession()
        received = []
        session.subscribe(received.append)
        session.unsubscribe(received.append)
        session.start_game()
        session.drop_piece(0)
        assert received == []

    def test_listener_can_restart_the_game(self):
        session = GameSession()
        restarted = []

        def restart_on_tie(event):
            if isinstance(event, Tied):
                restarted.append(session.start_game())

        session.subscribe(restart_on_tie)
        state = session.start_game()
        state.board[:] = TIE_PATTERN
        state.board[0, 0] = 0

        result = session.drop_piece(0)
        assert result.status is Status.TIED
        assert len(restarted) == 1
        assert session.state is restarted[0]
        assert session.status is Status.IN_PROGRESS
        assert session.drop_piece(3).accepted


class TestConcurrency:
    def test_concurrent_drops_are_serialized(self):
        session = GameSession(Config(board=BoardConfig(width=12, height=12)))
        session.start_game()
        results = []
        lock = threading.Lock()

        def worker(offset):
            for i in range(20):
                result = session.drop_piece((offset + i) % 12)
                with lock:
                    results.append(result)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        state = session.state
        accepted = sum(1 for r in results if r.accepted)
        assert state.move_count == accepted
        assert int(np.count_nonzero(state.board)) == accepted
