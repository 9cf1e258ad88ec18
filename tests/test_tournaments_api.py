"""
Tournament listing, config and admin controls
"""
from core.tournament_config import TOURNAMENT_CONFIG


class TestPublicReads:

    def test_list_has_all_variants(self, client):
        response = client.get("/api/tournaments")
        assert response.status_code == 200

        tournaments = response.json()
        assert len(tournaments) == 6
        by_variant = {(t["gameType"], t["tournamentType"]): t for t in tournaments}
        assert by_variant[("bgmi", "solo")]["maxSlots"] == 100
        assert by_variant[("freefire", "squad")]["maxSlots"] == 12
        assert all(t["registeredCount"] == 0 for t in tournaments)
        assert all(t["isActive"] for t in tournaments)

    def test_single_tournament(self, client):
        response = client.get("/api/tournaments/freefire/duo")
        assert response.status_code == 200
        data = response.json()
        assert data["maxSlots"] == 24
        assert data["availableSlots"] == 24

    def test_invalid_tournament_type(self, client):
        response = client.get("/api/tournaments/bgmi/trio")
        assert response.status_code == 400

    def test_config(self, client):
        response = client.get("/api/tournaments/config")
        assert response.status_code == 200

        variants = response.json()["variants"]
        assert len(variants) == 6
        bgmi_squad = next(v for v in variants if v["gameType"] == "bgmi" and v["tournamentType"] == "squad")
        assert bgmi_squad == {
            "gameType": "bgmi",
            "tournamentType": "squad",
            "maxSlots": 25,
            "entryFee": 80,
            "winner": 350,
            "runnerUp": 250,
            "perKill": 9,
            "maxPlayers": 4,
        }


def test_config_players_match_tournament_type():
    for variants in TOURNAMENT_CONFIG.values():
        for tournament_type, variant in variants.items():
            assert variant.max_players == tournament_type.players


class TestAdminControls:

    def test_update_qr_code(self, client, auth_headers):
        response = client.patch(
            "/api/tournaments/bgmi/duo/qr",
            json={"qrCodeUrl": "https://cdn.example.com/qr/bgmi-duo.png"},
            headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["qrCodeUrl"] == "https://cdn.example.com/qr/bgmi-duo.png"

        assert client.get("/api/tournaments/bgmi/duo").json()["qrCodeUrl"] == "https://cdn.example.com/qr/bgmi-duo.png"

    def test_blank_qr_code(self, client, auth_headers):
        response = client.patch("/api/tournaments/bgmi/duo/qr", json={"qrCodeUrl": "  "}, headers=auth_headers)
        assert response.status_code == 400

    def test_toggle_active(self, client, auth_headers):
        response = client.patch("/api/tournaments/freefire/solo/active", json={"isActive": False}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["isActive"] is False

        response = client.patch("/api/tournaments/freefire/solo/active", json={"isActive": True}, headers=auth_headers)
        assert response.json()["isActive"] is True

    def test_admin_endpoints_need_token(self, client):
        assert client.patch("/api/tournaments/bgmi/duo/qr", json={"qrCodeUrl": "x"}).status_code == 401
        assert client.patch("/api/tournaments/bgmi/duo/active", json={"isActive": False}).status_code == 401
        assert client.post(
            "/api/tournaments/reset", json={"gameType": "bgmi", "tournamentType": "duo"}
        ).status_code == 401

    def test_reset_invalid_variant(self, client, auth_headers):
        response = client.post(
            "/api/tournaments/reset", json={"gameType": "bgmi", "tournamentType": "trio"}, headers=auth_headers
        )
        assert response.status_code == 400
