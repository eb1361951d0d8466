import unittest

from fastapi.testclient import TestClient

from c4backend.app.engine.search import SearchEngine
from c4backend.app.main import app, get_registry
from c4backend.app.services.game_session import GameSession
from c4backend.app.services.session_registry import SessionRegistry


class TestSessionAPI(unittest.TestCase):
    def setUp(self):
        self.sessions = SessionRegistry(factory=lambda: GameSession(SearchEngine(min_depth=1, max_depth=3)))
        app.dependency_overrides[get_registry] = lambda: self.sessions
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def _create(self) -> int:
        response = self.client.post("/sessions")
        self.assertEqual(response.status_code, 200)
        return response.json()["id"]

    def test_create_and_get(self):
        response = self.client.post("/sessions")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"]["legal_columns"], list(range(7)))
        self.assertFalse(body["status"]["game_over"])

        response = self.client.get(f"/sessions/{body['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["current_player"], 1)

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/sessions/999").status_code, 404)
        self.assertEqual(self.client.post("/sessions/999/ai-move").status_code, 404)
        self.assertEqual(self.client.delete("/sessions/999").status_code, 404)

    def test_move_and_full_column(self):
        session_id = self._create()
        player = 1
        for _ in range(6):
            response = self.client.post(f"/sessions/{session_id}/move", json={"column": 0, "player": player})
            self.assertEqual(response.status_code, 200)
            player = 3 - player

        self.assertEqual(response.json()["board"][0][0], 2)
        response = self.client.post(f"/sessions/{session_id}/move", json={"column": 0, "player": player})
        self.assertEqual(response.status_code, 400)

        response = self.client.post(f"/sessions/{session_id}/move", json={"column": 9, "player": 1})
        self.assertEqual(response.status_code, 400)

    def test_invalid_player_rejected(self):
        session_id = self._create()
        response = self.client.post(f"/sessions/{session_id}/move", json={"column": 3, "player": 5})
        self.assertEqual(response.status_code, 422)

    def test_human_then_ai_turn(self):
        session_id = self._create()
        self.client.post(f"/sessions/{session_id}/move", json={"column": 3, "player": 1})
        response = self.client.post(f"/sessions/{session_id}/switch-turn")
        self.assertEqual(response.json()["current_player"], 2)

        response = self.client.post(f"/sessions/{session_id}/ai-move")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn(body["column"], range(7))
        pieces = [cell for row in body["status"]["board"] for cell in row if cell]
        self.assertEqual(sorted(pieces), [1, 2])
        self.assertNotIn(session_id, self.sessions.processing_ids)

    def test_ai_move_refused_while_processing(self):
        session_id = self._create()
        self.sessions.processing_ids.add(session_id)
        self.assertEqual(self.client.post(f"/sessions/{session_id}/ai-move").status_code, 409)
        response = self.client.post(f"/sessions/{session_id}/move", json={"column": 3, "player": 1})
        self.assertEqual(response.status_code, 409)

    def test_status_refused_while_processing(self):
        session_id = self._create()
        self.sessions.processing_ids.add(session_id)
        self.assertEqual(self.client.get(f"/sessions/{session_id}").status_code, 409)

        self.sessions.processing_ids.discard(session_id)
        response = self.client.get(f"/sessions/{session_id}")
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["game_over"])

    def test_ai_move_on_finished_game(self):
        session_id = self._create()
        for _ in range(4):
            self.client.post(f"/sessions/{session_id}/move", json={"column": 1, "player": 1})
        response = self.client.post(f"/sessions/{session_id}/ai-move")
        body = response.json()
        self.assertIsNone(body["column"])
        self.assertTrue(body["status"]["game_over"])
        self.assertEqual(body["status"]["winner"], "human")

    def test_reset_and_delete(self):
        session_id = self._create()
        self.client.post(f"/sessions/{session_id}/move", json={"column": 3, "player": 1})
        response = self.client.post(f"/sessions/{session_id}/reset")
        self.assertEqual(response.json()["board"][5][3], 0)

        self.assertEqual(self.client.delete(f"/sessions/{session_id}").status_code, 200)
        self.assertEqual(self.client.get(f"/sessions/{session_id}").status_code, 404)


if __name__ == '__main__':
    unittest.main()
