from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List, Set

class Settings(BaseSettings):
    # App Info
    app_name: str = "POS Billing API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database (MySQL, stored procedures)
    database_url: str = "mysql+pymysql://root:@localhost:3306/billing"
    db_pool_size: int = 10
    db_max_overflow: int = 5

    # CORS
    allowed_origins: List[str] = ["*"]

    # File Upload
    upload_dir: str = "uploads"
    public_base_url: str = Field(
        default="http://localhost:5000",
        description="Base URL used to build product imageUrl values"
    )
    fallback_image_name: str = "no-image-icon-4.png"
    max_image_size: int = 5 * 1024 * 1024  # 5MB
    profile_image_types: Set[str] = {"image/png"}

    # Billing
    business_timezone: str = Field(
        default="Asia/Kolkata",
        description="Timezone used for BillDate on bills and points"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
