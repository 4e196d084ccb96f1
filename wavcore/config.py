# wavcore/config.py
from pydantic import BaseModel


class Settings(BaseModel):
    max_channels: int = 6
    bits_per_sample: int = 16
    log_level: str = "WARNING"


settings = Settings()
