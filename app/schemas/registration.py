"""Public self-registration form submission."""

from pydantic import BaseModel


class RegistrationSubmission(BaseModel):
    """
    Raw form fields as posted. Validation (trimming, required fields, password
    confirmation) happens in the registration service so each failure maps to
    one user-facing message.
    """

    username: str = ""
    fullname: str = ""
    email: str = ""
    password: str = ""
    password_confirm: str = ""
    token: str | None = None
