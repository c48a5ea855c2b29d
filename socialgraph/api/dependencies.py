from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from ..core.service import SocialService

service = SocialService()


def get_service() -> SocialService:
    return service


Service = Annotated[SocialService, Depends(get_service)]
