from fastapi import APIRouter
from typing import List

from multilingua.config import settings
from multilingua.i18n.locale import get_language_info
from multilingua.schemas import LanguageInfo

router = APIRouter()


@router.get("/languages", response_model=List[LanguageInfo])
async def list_supported_languages():
    """Languages the site offers, with display names and RTL flag."""
    return [LanguageInfo(**get_language_info(code)) for code in settings.supported_languages]
