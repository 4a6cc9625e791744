"""Contact mail schema."""

from pydantic import EmailStr, Field

from fitness_server.schemas.common import CamelModel


class ContactMessage(CamelModel):
    """Message relayed to the support inbox."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    # Becomes a mail header, so line breaks are rejected
    subject: str = Field(..., min_length=1, max_length=200, pattern=r"^[^\r\n]*$")
    message: str = Field(..., min_length=1)
