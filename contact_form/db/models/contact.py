import datetime as dt

from sqlalchemy import Column, DateTime, Integer, String

from contact_form.db.base import Base

class Contact(Base):
    __tablename__ = "contatos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String, nullable=False)
    telefone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc), nullable=False)

    def __repr__(self):
        return f"<Contact id={self.id} nome={self.nome!r}>"
