from contact_form.db.models.contact import Contact

__all__ = ["Contact"]
