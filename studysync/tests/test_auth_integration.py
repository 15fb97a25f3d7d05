from __future__ import annotations

import threading
from unittest.mock import MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

import studysync.app as app_module
from studysync.app import create_app
from studysync.application.services.auth_service import AuthResult, AuthService
from studysync.application.services.password_hashing import WerkzeugPasswordHasher
from studysync.application.use_cases.accounts.signup import SignupUseCase
from studysync.infrastructure.db import ENGINE, Base, SessionLocal
from studysync.infrastructure.db.models import Account, SessionRecord
from studysync.infrastructure.repositories.accounts.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from studysync.shared.config import load_config


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def _post(client, action: str, username: str, password: str):
    return client.post(f"/api/auth?action={action}", data={"username": username, "password": password})


def test_signup_login_whoami_logout_flow() -> None:
    app = create_app()
    cookie_name = load_config().session.cookie_name

    with app.test_client() as client:
        signup = _post(client, "signup", "alice", "secret1")
        assert signup.status_code == 200
        assert signup.get_json() == {"success": True, "message": "Account created"}

        login = _post(client, "login", "alice", "secret1")
        assert login.get_json() == {"success": True, "message": "Logged in"}
        assert client.get_cookie(cookie_name)

        me = client.get("/api/auth?action=whoami")
        assert me.get_json()["username"] == "alice"

        logout = client.post("/api/auth?action=logout")
        assert logout.get_json() == {"success": True, "message": "Logged out"}
        assert client.get_cookie(cookie_name) is None

    session = SessionLocal()
    try:
        assert session.query(Account).count() == 1
        assert session.query(SessionRecord).count() == 0
    finally:
        session.close()


def test_login_records_session_bound_to_account() -> None:
    app = create_app()

    with app.test_client() as client:
        _post(client, "signup", "alice", "secret1")
        _post(client, "login", "alice", "secret1")

    session = SessionLocal()
    try:
        account = session.scalars(select(Account).where(Account.username == "alice")).one()
        record = session.scalars(select(SessionRecord)).one()
        assert record.user_id == account.id
        assert record.username == "alice"
        assert record.expires_at > record.created_at
    finally:
        session.close()


def test_duplicate_signup_and_unified_login_failures() -> None:
    app = create_app()

    with app.test_client() as client:
        assert _post(client, "signup", "alice", "secret1").get_json()["success"] is True
        duplicate = _post(client, "signup", "alice", "different")
        wrong_password = _post(client, "login", "alice", "secret2")
        unknown_user = _post(client, "login", "bob", "secret1")

    assert duplicate.get_json() == {"success": False, "message": "Username already taken"}
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json() == {"success": False, "message": "Invalid credentials"}


@pytest.mark.parametrize(
    ("action", "username", "password"),
    [("signup", "", "x"), ("signup", "x", ""), ("login", "", "x"), ("login", "x", "")],
)
def test_missing_fields_leave_store_untouched(action: str, username: str, password: str) -> None:
    app = create_app()

    with app.test_client() as client:
        response = _post(client, action, username, password)

    assert response.status_code == 200
    assert response.get_json() == {"success": False, "message": "Missing fields"}
    session = SessionLocal()
    try:
        assert session.query(Account).count() == 0
        assert session.query(SessionRecord).count() == 0
    finally:
        session.close()


def test_identical_passwords_get_distinct_hashes() -> None:
    app = create_app()

    with app.test_client() as client:
        _post(client, "signup", "alice", "shared-password")
        _post(client, "signup", "bob", "shared-password")

    session = SessionLocal()
    try:
        hashes = session.scalars(select(Account.password_hash)).all()
    finally:
        session.close()
    assert len(hashes) == 2
    assert hashes[0] != hashes[1]
    assert all("shared-password" not in h for h in hashes)


def test_concurrent_signup_has_exactly_one_winner() -> None:
    barrier = threading.Barrier(2, timeout=10)

    class BarrierHasher(WerkzeugPasswordHasher):
        # Both requests pass the uniqueness pre-check before either inserts.
        def hash(self, password: str) -> str:
            hashed = super().hash(password)
            barrier.wait()
            return hashed

    signup = SignupUseCase(
        accounts=SqlAlchemyAccountRepository(),
        password_hasher=BarrierHasher(method="pbkdf2:sha256:1000"),
    )
    service = AuthService(
        signup_use_case=signup,
        login_use_case=MagicMock(),
        logout_use_case=MagicMock(),
        resolve_session_use_case=MagicMock(),
    )
    results: list[AuthResult] = []
    lock = threading.Lock()

    def worker(password: str) -> None:
        result = service.signup("bob", password)
        with lock:
            results.append(result)

    threads = [threading.Thread(target=worker, args=(p,)) for p in ("pw-one", "pw-two")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert len(results) == 2
    assert sorted(r.success for r in results) == [False, True]
    loser = next(r for r in results if not r.success)
    assert loser.message == "Username already taken"
    session = SessionLocal()
    try:
        assert session.query(Account).filter(Account.username == "bob").count() == 1
    finally:
        session.close()


def test_health_reports_database_ok() -> None:
    app = create_app()

    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "database": "ok"}


def test_unreachable_store_at_startup_returns_500(monkeypatch: pytest.MonkeyPatch) -> None:
    def _unreachable() -> None:
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(app_module, "init_db", _unreachable)
    app = create_app()

    with app.test_client() as client:
        response = _post(client, "login", "alice", "secret1")

    assert response.status_code == 500
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message"].startswith("Cannot connect to database")


def test_overlong_username_is_rejected_before_storage() -> None:
    app = create_app()

    with app.test_client() as client:
        signup = _post(client, "signup", "u" * 101, "secret1")
        login = _post(client, "login", "u" * 101, "secret1")

    assert signup.status_code == 200
    assert signup.get_json() == {"success": False, "message": "Username too long"}
    assert login.get_json() == {"success": False, "message": "Invalid credentials"}
    session = SessionLocal()
    try:
        assert session.query(Account).count() == 0
    finally:
        session.close()


def test_long_password_signs_up_and_logs_in() -> None:
    app = create_app()
    password = "correct horse " * 120

    with app.test_client() as client:
        signup = _post(client, "signup", "alice", password)
        login = _post(client, "login", "alice", password)

    assert signup.get_json() == {"success": True, "message": "Account created"}
    assert login.get_json() == {"success": True, "message": "Logged in"}


def test_null_json_fields_report_missing_fields() -> None:
    app = create_app()

    with app.test_client() as client:
        response = client.post(
            "/api/auth", json={"action": "signup", "username": None, "password": "secret1"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"success": False, "message": "Missing fields"}


def test_request_id_is_echoed_or_generated() -> None:
    app = create_app()

    with app.test_client() as client:
        echoed = client.get("/api/health", headers={"X-Request-ID": "req-42"})
        generated = client.get("/api/health")

    assert echoed.headers["X-Request-ID"] == "req-42"
    assert generated.headers["X-Request-ID"] not in ("", "-", "req-42")


def test_create_app_reads_config_when_called(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENABLE_HSTS", "true")
    load_config.cache_clear()
    try:
        app = create_app()
    finally:
        load_config.cache_clear()

    with app.test_client() as client:
        response = client.get("/api/health")

    assert "Strict-Transport-Security" in response.headers
