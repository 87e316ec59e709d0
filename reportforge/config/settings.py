from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "reportforge"
    db_username: str = "reportforge"
    db_password: str = "secret"

    max_upload_bytes: int = Field(default=16 * 1024 * 1024, gt=0)
    recent_submissions_limit: int = Field(default=20, gt=0)

    extractor_pdf_engine: str = "pdfplumber"
    extraction_timeout_seconds: float = Field(default=60.0, gt=0)

    pagination_policy: str = "line"
    pagination_wrap_width: int = Field(default=95, gt=0)
    pagination_max_lines_per_page: int = Field(default=44, gt=0)
    pagination_words_per_page: int = Field(default=500, gt=0)
    metrics_words_per_page_estimate: int = Field(default=250, gt=0)

    detection_provider: str = "placeholder"
    placeholder_similarity_score: float = Field(default=8.0, ge=0, le=100)
    placeholder_ai_score: float = Field(default=0.0, ge=0, le=100)

    render_engine: str = "process"
    render_engine_start_timeout_seconds: float = Field(default=30.0, gt=0)
    render_timeout_seconds: float = Field(default=60.0, gt=0)
    report_brand: str = "reportforge"

    artifact_storage: str = "local"
    artifact_local_root: str = "/app/files/artifacts"
    artifact_prefix: str = "submissions"
    upload_timeout_seconds: float = Field(default=60.0, gt=0)
    signed_url_ttl_seconds: int = Field(default=900, gt=0)

    s3_bucket: str = ""
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None
