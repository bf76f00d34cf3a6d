from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./balcony.db"
    APP_NAME: str = "Balcony Calculator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Catalog
    CATEGORY_CACHE_TTL_SECONDS: float = 300.0  # 5 minutes
    ITEMS_PER_PAGE: int = 100

    # Calculation constants
    WASTE_FACTOR: float = 1.10        # 10% waste on sheet/panel finishes
    RAIL_WASTE_FACTOR: float = 1.05   # 5% waste on battens
    RAIL_STEP_M: float = 0.5          # batten spacing
    RAIL_DEFAULT_LENGTH_MM: float = 3000.0
    PAINT_COVERAGE_M2: float = 10.0   # m² per unit of paint

    class Config:
        env_file = ".env"


settings = Settings()
