"""Contact mail relay endpoint."""

from fastapi import APIRouter

from fitness_server.dependencies import MailServiceDep
from fitness_server.schemas.common import MessageResponse
from fitness_server.schemas.mail import ContactMessage

router = APIRouter(tags=["Mail"])


@router.post("/send-mail", response_model=MessageResponse)
async def send_mail(contact: ContactMessage, mail_service: MailServiceDep):
    """Relay a contact message to the support inbox."""
    await mail_service.send_contact_message(
        contact.name, contact.email, contact.subject, contact.message
    )
    return MessageResponse(message="Email sent successfully")
