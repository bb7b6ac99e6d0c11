from __future__ import annotations

from fastapi import APIRouter, Depends

from vlogsite.api import deps
from vlogsite.schemas.contact import ContactMessageOut
from vlogsite.schemas.token import AdminOut
from vlogsite.services.contact_service import list_contact_messages

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/contact-messages", response_model=list[ContactMessageOut])
def admin_list_contact_messages(
    current_admin: AdminOut = Depends(deps.get_current_admin),
) -> list[ContactMessageOut]:
    return list_contact_messages()
