"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends

from paintquote.config import Settings, get_settings

AppSettings = Annotated[Settings, Depends(get_settings)]
