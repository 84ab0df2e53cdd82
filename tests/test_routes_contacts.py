import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from contact_form.db.session import get_db
from contact_form.schemas.contact import EMAIL_INVALID, NAME_REQUIRED, NAME_TOO_SHORT, PHONE_INVALID

ANA = {"nome": "Ana Silva", "telefone": "(11) 91234-5678", "email": "ana@b.com"}


@pytest.fixture
def unreachable_store(app, tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'no-such-dir' / 'contatos.db'}")

    def unreachable_db():
        db = Session(bind=engine)
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = unreachable_db
    yield
    app.dependency_overrides.clear()
    engine.dispose()


def test_form_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    for name in ("nome", "telefone", "email"):
        assert f'name="{name}"' in response.text


def test_short_name_is_rejected_and_not_stored(client, stored_contacts):
    response = client.post("/", data={"nome": "Jo", "telefone": "(11) 91234-5678", "email": "a@b.com"})

    assert response.status_code == 200
    assert response.text == NAME_TOO_SHORT
    assert stored_contacts() == []


def test_empty_name_gets_minimum_length_message(client, stored_contacts):
    response = client.post("/", data={"nome": "", "telefone": "(11) 91234-5678", "email": "a@b.com"})

    assert response.status_code == 200
    assert response.text == NAME_TOO_SHORT
    assert stored_contacts() == []


def test_absent_name_is_required(client):
    response = client.post("/", data={"telefone": "(11) 91234-5678", "email": "a@b.com"})

    assert response.text == NAME_REQUIRED


def test_malformed_phone_is_rejected(client, stored_contacts):
    response = client.post("/", data={**ANA, "telefone": "11912345678"})

    assert response.status_code == 200
    assert PHONE_INVALID in response.text
    assert stored_contacts() == []


def test_malformed_email_is_rejected(client):
    response = client.post("/", data={**ANA, "email": "ana.b.com"})

    assert response.text == EMAIL_INVALID


def test_all_errors_joined_with_semicolon(client):
    response = client.post("/", data={"nome": "Jo", "telefone": "123", "email": "x"})

    assert response.status_code == 200
    assert response.text == ";".join([NAME_TOO_SHORT, PHONE_INVALID, EMAIL_INVALID])


def test_valid_submission_is_saved(client, stored_contacts):
    response = client.post("/", data=ANA)

    assert response.status_code == 200
    assert response.text == "Contato salvo com sucesso"
    assert stored_contacts() == [("Ana Silva", "(11) 91234-5678", "ana@b.com")]


def test_email_is_stored_as_submitted(client, stored_contacts):
    response = client.post("/", data={**ANA, "email": "Ana@B.COM"})

    assert response.text == "Contato salvo com sucesso"
    assert stored_contacts() == [("Ana Silva", "(11) 91234-5678", "Ana@B.COM")]


def test_listing_shows_saved_contacts(client):
    client.post("/", data=ANA)
    client.post("/", data={"nome": "Bruno Costa", "telefone": "(21) 99876-5432", "email": "bruno@c.com"})

    response = client.get("/contatos")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Ana Silva" in response.text
    assert "(21) 99876-5432" in response.text
    assert response.text.index("Ana Silva") < response.text.index("Bruno Costa")


def test_listing_is_stable_without_writes(client):
    client.post("/", data=ANA)

    first = client.get("/contatos")
    second = client.get("/contatos")

    assert first.text == second.text


def test_listing_empty_store(client):
    response = client.get("/contatos")

    assert response.status_code == 200
    assert "Nenhum contato cadastrado." in response.text


def test_listing_store_unreachable(app, unreachable_store):
    with TestClient(app) as client:
        response = client.get("/contatos")

    assert response.status_code == 500
    assert response.text == "Erro ao listar os contatos"


def test_create_failure_answers_500(app, unreachable_store):
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/", data=ANA)

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
