from contact_form.main import run

run()
