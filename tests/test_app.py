import json
import tempfile
import unittest

from app import cell_to_json, create_app
from clue_core.board import ClueBoard

from sample_board import DATA_LAYOUT, DATA_LEGEND, write_config


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self.board = ClueBoard(DATA_LAYOUT, DATA_LEGEND)
        self.app = create_app(self.board)
        self.client = self.app.test_client()

    def test_given_first_request_when_board_not_loaded_then_loaded_lazily(self):
        self.assertFalse(self.board.is_initialized)
        r = self.client.get("/api/dimensions")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json(), {"ok": True, "rows": 9, "cols": 12})
        self.assertTrue(self.board.is_initialized)

    def test_given_legend_request_when_called_then_codes_walkway_and_cards(self):
        d = self.client.get("/api/legend").get_json()
        self.assertTrue(d["ok"])
        self.assertEqual(d["legend"]["B"], "Ballroom")
        self.assertEqual(d["walkway"], "W")
        self.assertIn("Study", d["cardRooms"])

    def test_given_coords_when_requesting_cell_then_serialized(self):
        r = self.client.get("/api/cell?row=2&col=2")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["cell"], {"row": 2, "col": 2, "code": "C>", "kind": "door_right"})

    def test_given_coords_when_requesting_neighbors_then_sorted_cells(self):
        d = self.client.get("/api/neighbors?row=3&col=6").get_json()
        self.assertEqual([(c["row"], c["col"]) for c in d["neighbors"]], [(2, 6), (3, 5), (3, 7)])

    def test_given_move_when_posting_targets_then_returned_and_remembered(self):
        payload = {"row": 0, "col": 3, "steps": 3}
        r = self.client.post("/api/targets", data=json.dumps(payload), content_type="application/json")
        self.assertEqual(r.status_code, 200)
        d = r.get_json()
        self.assertTrue(d["ok"])
        self.assertEqual([(c["row"], c["col"]) for c in d["targets"]], [(2, 2), (3, 3)])

        last = self.client.get("/api/targets").get_json()
        self.assertEqual(last["targets"], d["targets"])

    def test_given_bad_parameters_when_requesting_then_400(self):
        self.assertEqual(self.client.get("/api/cell?row=1").status_code, 400)
        self.assertEqual(self.client.get("/api/cell?row=a&col=1").status_code, 400)
        self.assertEqual(self.client.get("/api/cell?row=99&col=1").status_code, 400)
        r = self.client.post("/api/targets", data="nope", content_type="application/json")
        self.assertEqual(r.status_code, 400)
        r2 = self.client.post("/api/targets", data=json.dumps({"row": 3, "col": 3, "steps": 0}),
                              content_type="application/json")
        self.assertEqual(r2.status_code, 400)
        self.assertFalse(r2.get_json()["ok"])
        for bad in (None, [3], {"n": 3}, True, 2.5, "x"):
            r3 = self.client.post("/api/targets", data=json.dumps({"row": bad, "col": 3, "steps": 2}),
                                  content_type="application/json")
            self.assertEqual(r3.status_code, 400, bad)
            self.assertFalse(r3.get_json()["ok"])
        r4 = self.client.post("/api/targets", data=json.dumps({"row": "3", "col": 3, "steps": 1}),
                              content_type="application/json")
        self.assertEqual(r4.status_code, 200)

    def test_given_broken_config_when_requesting_then_500_and_board_uninitialized(self):
        with tempfile.TemporaryDirectory() as td:
            layout, legend = write_config(td, ["K,W", "W"], ["K, Kitchen, Card", "W, Walkway, Other"])
            board = ClueBoard(layout, legend)
            client = create_app(board).test_client()
            r = client.get("/api/dimensions")
        self.assertEqual(r.status_code, 500)
        self.assertFalse(r.get_json()["ok"])
        self.assertFalse(board.is_initialized)

    def test_given_cell_when_serializing_then_plain_json_types(self):
        self.board.initialize()
        self.assertEqual(cell_to_json(self.board.cell_at(3, 0)), {"row": 3, "col": 0, "code": "W", "kind": "walkway"})


if __name__ == '__main__':
    unittest.main(verbosity=2)
