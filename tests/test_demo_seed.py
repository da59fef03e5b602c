from pocketledger.models import Account, Category, User
from pocketledger.services.categories_service import DEFAULT_CATEGORIES
from pocketledger.services.demo_service import DEMO_USER, seed_demo_user


class TestDemoSeed:

    def test_seed_creates_user_accounts_and_categories(self, db_session):
        result = seed_demo_user(db_session)

        assert result["created"] is True
        user = db_session.query(User).filter_by(email=DEMO_USER["email"]).one()
        assert db_session.query(Account).filter_by(user_id=user.id).count() == 2
        assert db_session.query(Category).filter_by(user_id=user.id).count() == len(DEFAULT_CATEGORIES)

    def test_seed_is_idempotent(self, db_session):
        first = seed_demo_user(db_session)
        second = seed_demo_user(db_session)

        assert second == {"created": False, "user_id": first["user_id"]}
        assert db_session.query(User).count() == 1

    def test_demo_user_can_log_in(self, client, db_session):
        seed_demo_user(db_session)
        response = client.post(
            "/api/auth/login",
            json={"email": DEMO_USER["email"], "password": DEMO_USER["password"]},
        )
        assert response.status_code == 200
