import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    app_env: str = Field(default=os.getenv("APP_ENV", "dev"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # Fixed report; empty means the bundled storage/trillium_report.md
    report_path: str = Field(default=os.getenv("REPORT_PATH", ""))

    # Interactive sessions live in memory only
    session_ttl_seconds: float = Field(default=float(os.getenv("SESSION_TTL_SECONDS", "3600")))
    max_sessions: int = Field(default=int(os.getenv("MAX_SESSIONS", "1000")))

    # Azure OpenAI
    az_endpoint: str = Field(default=os.getenv("AZURE_OPENAI_ENDPOINT", ""))
    az_api_key: str = Field(default=os.getenv("AZURE_OPENAI_API_KEY", ""))
    az_api_version: str = Field(default=os.getenv("AZURE_OPENAI_API_VERSION", "2024-08-01-preview"))
    az_deployment: str = Field(default=os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4o"))
    az_model: str = Field(default=os.getenv("AZURE_OPENAI_MODEL", "gpt-4o"))

    # LangSmith
    langsmith_api_key: str = Field(default=os.getenv("LANGSMITH_API_KEY", ""))
    langsmith_project: str = Field(default=os.getenv("LANGSMITH_PROJECT", "trillium-kb"))
    langsmith_tracing: bool = Field(default=os.getenv("LANGSMITH_TRACING", "0") == "1")

settings = Settings()
