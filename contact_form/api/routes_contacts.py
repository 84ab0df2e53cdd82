import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from contact_form.db.repository import ContactRepository, ContactStoreError
from contact_form.db.session import get_db
from contact_form.schemas.contact import ContactInvalid, validate_contact

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Contato salvo com sucesso"
LIST_FAILED_MESSAGE = "Erro ao listar os contatos"
FORM_FIELDS = ("nome", "telefone", "email")


async def submitted_fields(request: Request) -> dict:
    # only keys absent from the body count as missing; "" is kept
    form = await request.form()
    return {name: form[name] for name in FORM_FIELDS if name in form}


# ===============================
# GET /
# ===============================
@router.get("/", response_class=HTMLResponse)
def contact_form(request: Request):
    return templates.TemplateResponse(request, "index.html")


# ===============================
# POST /
# ===============================
@router.post("/", response_class=PlainTextResponse)
def submit_contact(
    submitted: dict = Depends(submitted_fields),
    db: Session = Depends(get_db),
):
    result = validate_contact(submitted)

    # Both outcomes answer 200; only the body tells them apart.
    if isinstance(result, ContactInvalid):
        logger.info(f"Rejected contact submission: {result.errors}")
        return PlainTextResponse(";".join(result.errors))

    ContactRepository(db).create(result.contact)
    return PlainTextResponse(SAVED_MESSAGE)


# ===============================
# GET /contatos
# ===============================
@router.get("/contatos", response_class=HTMLResponse)
def list_contacts(request: Request, db: Session = Depends(get_db)):
    try:
        contatos = ContactRepository(db).list_all()
    except ContactStoreError:
        return PlainTextResponse(LIST_FAILED_MESSAGE, status_code=500)

    return templates.TemplateResponse(request, "contatos.html", {"contatos": contatos})
