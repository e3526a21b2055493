# 服务器配置
from pydantic_settings import BaseSettings, SettingsConfigDict

class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BLOG_DIRECTORY_PATH: str = "/opt/lampp/htdocs/SMVDSite/blogs"
    BLOG_ASSET_BASE_PATH: str = "/SMVDSite/blogs"
    SERVE_BLOG_FILES: bool = False
    ENABLE_LOGGING: bool = True
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

config = Config()

def get_config() -> Config:
    return config
