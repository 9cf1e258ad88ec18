"""
Slot accounting: registered_count must track pending + approved registrations
"""
from models.tournament import Tournament
from core.tournament_config import GameType, TournamentType


def _tournament_json(client, game_type, tournament_type):
    response = client.get("/api/tournaments")
    assert response.status_code == 200
    for tournament in response.json():
        if tournament["gameType"] == game_type and tournament["tournamentType"] == tournament_type:
            return tournament
    raise AssertionError(f"{game_type}/{tournament_type} missing from list")


class TestCreateAndDelete:

    def test_create_increments_count(self, client, register, tournament_count):
        register()
        register()
        assert tournament_count() == 2

        tournament = _tournament_json(client, "bgmi", "solo")
        assert tournament["registeredCount"] == 2
        assert tournament["availableSlots"] == 98

    def test_delete_decrements_count(self, client, register, auth_headers, tournament_count):
        first = register()
        register()

        response = client.delete(f"/api/registrations/{first['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert tournament_count() == 1

    def test_create_delete_sequence_ends_at_zero(self, client, register, auth_headers, tournament_count):
        ids = [register("freefire", "duo")["id"] for _ in range(3)]
        for registration_id in ids:
            client.delete(f"/api/registrations/{registration_id}", headers=auth_headers)

        assert tournament_count("freefire", "duo") == 0
        assert _tournament_json(client, "freefire", "duo")["registeredCount"] == 0

    def test_delete_unknown_registration_is_404(self, client, auth_headers, tournament_count):
        response = client.delete("/api/registrations/does-not-exist", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Registration not found"}
        assert tournament_count() == 0

    def test_variants_are_counted_separately(self, register, tournament_count):
        register("bgmi", "solo")
        register("bgmi", "squad")
        register("freefire", "solo")

        assert tournament_count("bgmi", "solo") == 1
        assert tournament_count("bgmi", "squad") == 1
        assert tournament_count("freefire", "solo") == 1
        assert tournament_count("bgmi", "duo") == 0


class TestCapacity:

    def test_full_tournament_rejects_registration(self, client, registration_payload, tournament_count):
        for i in range(100):
            response = client.post(
                "/api/registrations",
                json=registration_payload("bgmi", "solo", playerName=f"Player {i}")
            )
            assert response.status_code == 201

        response = client.post("/api/registrations", json=registration_payload("bgmi", "solo"))
        assert response.status_code == 400
        assert response.json() == {"error": "Tournament is full"}
        assert tournament_count() == 100

    def test_full_stored_count_rejects_registration(self, client, db_session, registration_payload, tournament_count):
        tournament = db_session.query(Tournament).filter(
            Tournament.game_type == GameType.FREEFIRE,
            Tournament.tournament_type == TournamentType.SQUAD
        ).first()
        tournament.registered_count = tournament.max_slots
        db_session.commit()

        response = client.post("/api/registrations", json=registration_payload("freefire", "squad"))
        assert response.status_code == 400
        assert response.json()["error"] == "Tournament is full"
        assert tournament_count("freefire", "squad") == 12

    def test_deleting_frees_a_slot_in_full_tournament(self, client, registration_payload, auth_headers, tournament_count):
        ids = []
        for _ in range(12):
            response = client.post("/api/registrations", json=registration_payload("freefire", "squad"))
            ids.append(response.json()["id"])

        assert client.post("/api/registrations", json=registration_payload("freefire", "squad")).status_code == 400

        client.delete(f"/api/registrations/{ids[0]}", headers=auth_headers)
        response = client.post("/api/registrations", json=registration_payload("freefire", "squad"))
        assert response.status_code == 201
        assert tournament_count("freefire", "squad") == 12


class TestStatusTransitions:

    def _set_status(self, client, headers, registration_id, status):
        response = client.patch(f"/api/registrations/{registration_id}", json={"status": status}, headers=headers)
        assert response.status_code == 200
        return response.json()

    def test_approve_keeps_slot(self, client, register, auth_headers, tournament_count):
        registration = register()
        updated = self._set_status(client, auth_headers, registration["id"], "approved")

        assert updated["status"] == "approved"
        assert updated["lastModifiedBy"] == "admin"
        assert tournament_count() == 1

    def test_reject_releases_slot(self, client, register, auth_headers, tournament_count):
        registration = register()
        self._set_status(client, auth_headers, registration["id"], "rejected")
        assert tournament_count() == 0

    def test_unreject_takes_slot_back(self, client, register, auth_headers, tournament_count):
        registration = register()
        self._set_status(client, auth_headers, registration["id"], "rejected")
        self._set_status(client, auth_headers, registration["id"], "pending")
        assert tournament_count() == 1

    def test_rejecting_twice_releases_once(self, client, register, auth_headers, tournament_count):
        register()
        registration = register()
        self._set_status(client, auth_headers, registration["id"], "rejected")
        self._set_status(client, auth_headers, registration["id"], "rejected")
        assert tournament_count() == 1

    def test_deleting_rejected_registration_leaves_count(self, client, register, auth_headers, tournament_count):
        register()
        rejected = register()
        self._set_status(client, auth_headers, rejected["id"], "rejected")
        assert tournament_count() == 1

        client.delete(f"/api/registrations/{rejected['id']}", headers=auth_headers)
        assert tournament_count() == 1

    def test_invalid_status_is_rejected(self, client, register, auth_headers):
        registration = register()
        response = client.patch(
            f"/api/registrations/{registration['id']}", json={"status": "banned"}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"


class TestReconcile:

    def test_list_corrects_drift(self, client, db_session, register, tournament_count):
        register()
        register()

        tournament = db_session.query(Tournament).filter(
            Tournament.game_type == GameType.BGMI,
            Tournament.tournament_type == TournamentType.SOLO
        ).first()
        tournament.registered_count = 7
        db_session.commit()

        assert _tournament_json(client, "bgmi", "solo")["registeredCount"] == 2
        assert tournament_count() == 2

    def test_negative_drift_is_corrected(self, client, db_session, register, tournament_count):
        register("bgmi", "duo")

        tournament = db_session.query(Tournament).filter(
            Tournament.game_type == GameType.BGMI,
            Tournament.tournament_type == TournamentType.DUO
        ).first()
        tournament.registered_count = 0
        db_session.commit()

        assert _tournament_json(client, "bgmi", "duo")["registeredCount"] == 1

    def test_rejected_registrations_are_not_counted(self, client, register, auth_headers, db_session):
        registration = register()
        client.patch(f"/api/registrations/{registration['id']}", json={"status": "rejected"}, headers=auth_headers)

        # Force drift so the list has something to correct
        tournament = db_session.query(Tournament).filter(
            Tournament.game_type == GameType.BGMI,
            Tournament.tournament_type == TournamentType.SOLO
        ).first()
        tournament.registered_count = 5
        db_session.commit()

        assert _tournament_json(client, "bgmi", "solo")["registeredCount"] == 0


class TestReset:

    def test_reset_clears_registrations_and_count(self, client, register, auth_headers, tournament_count):
        for _ in range(3):
            register()
        register("freefire", "solo")

        response = client.post(
            "/api/tournaments/reset",
            json={"gameType": "bgmi", "tournamentType": "solo"},
            headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["registeredCount"] == 0
        assert tournament_count() == 0
        assert tournament_count("freefire", "solo") == 1

        remaining = client.get("/api/registrations", headers=auth_headers).json()
        assert len(remaining) == 1
        assert remaining[0]["gameType"] == "freefire"
