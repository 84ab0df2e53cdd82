import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_form.db.models.contact import Contact
from contact_form.schemas.contact import ContactCreate


logger = logging.getLogger(__name__)


class ContactStoreError(Exception):
    """Raised when stored contacts cannot be read."""


class ContactRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, contact: ContactCreate) -> Contact:
        row = Contact(nome=contact.nome, telefone=contact.telefone, email=contact.email)
        try:
            self.db.add(row)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return row

    def list_all(self) -> list[Contact]:
        try:
            return list(self.db.scalars(select(Contact).order_by(Contact.id)))
        except SQLAlchemyError as e:
            logger.error(f"Failed to list contacts: {e}")
            raise ContactStoreError("could not read contacts") from e
