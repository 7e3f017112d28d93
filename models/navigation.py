# models/navigation.py

from typing import Optional
from pydantic import BaseModel, ConfigDict


class SubNavItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    href: str
    icon: Optional[str] = None
