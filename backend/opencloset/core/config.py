from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DEBUG: bool = False
    APP_NAME: str = "opencloset-helpers"
    APP_DATABASE_DSN: str = "sqlite:////tmp/opencloset.db"

    # SMS
    SMS_FROM: str = "07043257521"

    # Discounts
    SHIPPING_FEE: int = 3000
    EXTENSION_RATE: float = 0.2  # late fee rate per additional day
    SUIT_COUPON_MAX_PRICE: int = 30000
    SUIT_COUPON_MAX_PRICE_MALE: int = 30000
    SUIT_COUPON_MAX_PRICE_FEMALE: int = 30000

    # Helpers
    EXTRA_HOLIDAYS_PATH: str = ""  # INI file with [YYYY] sections and MMDD keys
    GRAVATAR_URL: str = "https://www.gravatar.com/avatar"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def suit_coupon_max_prices(self) -> dict[str, int]:
        return {
            "male": self.SUIT_COUPON_MAX_PRICE_MALE,
            "female": self.SUIT_COUPON_MAX_PRICE_FEMALE,
        }


settings = Settings()
