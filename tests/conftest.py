import pytest
from fastapi.testclient import TestClient

from contact_form.core.config import Settings
from contact_form.db.repository import ContactRepository
from contact_form.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'contatos.db'}",
        access_log_path=str(tmp_path / "access.log"),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def stored_contacts(app):
    def _stored():
        with app.state.database.session() as db:
            return [(c.nome, c.telefone, c.email) for c in ContactRepository(db).list_all()]
    return _stored
