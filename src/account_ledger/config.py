from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    # Lowest balance a withdrawal may leave behind
    overdraft_floor: Decimal = Field(default=Decimal("0"), ge=0)

    # Demo run
    demo_deposit: Decimal = Decimal("2000")
    demo_withdrawal: Decimal = Decimal("1500")


settings = Settings()
