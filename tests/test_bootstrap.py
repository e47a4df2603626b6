from taskboard.config.settings import Settings
from taskboard.models.user import User, Role
from taskboard.services.bootstrap import seed_admin_user
from taskboard.utils.security import verify_password


def test_seed_admin_user_is_idempotent(db):
    assert seed_admin_user(db) is True
    assert seed_admin_user(db) is False

    admins = db.query(User).filter(User.email == Settings.ADMIN_EMAIL).all()
    assert len(admins) == 1
    assert admins[0].role == Role.ADMIN
    assert verify_password(Settings.ADMIN_PASSWORD, admins[0].hashed_password)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
