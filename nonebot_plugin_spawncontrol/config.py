from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from nonebot.compat import PYDANTIC_V2, ConfigDict


class Config(BaseModel):
    spawncontrol_config_file: Optional[Path] = None
    spawncontrol_debug: Optional[bool] = None

    if PYDANTIC_V2:
        model_config = ConfigDict(extra="ignore")
    else:

        class Config:
            extra = "ignore"
