"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.core.mail import MailService, get_mail_service
from fitness_server.database import get_db

# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
MailServiceDep = Annotated[MailService, Depends(get_mail_service)]
