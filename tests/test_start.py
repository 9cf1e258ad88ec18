"""
Migrate-then-serve launcher
"""
import start


class TestStartup:

    def test_failed_migration_refuses_to_serve(self, monkeypatch):
        served = []

        def broken_upgrade(config, revision):
            raise RuntimeError("could not connect to server")

        monkeypatch.setattr(start.command, "upgrade", broken_upgrade)
        monkeypatch.setattr(start, "start_server", lambda: served.append(True))

        assert start.main() == 1
        assert served == []

    def test_serves_after_migrations(self, monkeypatch):
        served = []
        upgrades = []

        monkeypatch.setattr(start.command, "upgrade", lambda config, revision: upgrades.append(revision))
        monkeypatch.setattr(start, "start_server", lambda: served.append(True))

        assert start.main() == 0
        assert upgrades == ["head"]
        assert served == [True]

    def test_server_uses_configured_bind_address(self, monkeypatch):
        calls = []
        monkeypatch.setattr(start.settings, "host", "127.0.0.1")
        monkeypatch.setattr(start.settings, "port", 8123)
        monkeypatch.setattr(start.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        start.start_server()

        app, kwargs = calls[0]
        assert app == "main:app"
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8123
