# tests/test_seed.py
from todolist.security import decode_token
from todolist.seed import seed_demo_data, DEMO_EMAIL, DEMO_PASSWORD
from todolist.services.tasks import TaskService


def test_seed_creates_demo_user_once(db_session, auth_service):
    assert seed_demo_data(db_session) is True
    assert seed_demo_data(db_session) is False

    result = auth_service.authenticate(DEMO_EMAIL, DEMO_PASSWORD)
    assert result is not None
    assert result.full_name == "Administrador"


def test_seeded_tasks_respect_completion_invariant(db_session, auth_service, cfg):
    seed_demo_data(db_session)
    user_id = int(decode_token(auth_service.authenticate(DEMO_EMAIL, DEMO_PASSWORD).token, cfg)["sub"])

    tasks = TaskService(db_session).list_tasks(user_id)
    assert len(tasks) == 3
    assert all(t.is_completed == (t.completed_at is not None) for t in tasks)
    assert tasks[-1].title == "Finish the API backend"  # oldest last


def test_seed_skipped_when_users_exist(db_session, make_user):
    make_user("someone@test.com")
    assert seed_demo_data(db_session) is False
