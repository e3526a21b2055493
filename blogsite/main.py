# FastAPI 应用程序的主要入口点
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from blogsite.api import blog, posts
from blogsite.config import Config, config, get_config
from blogsite.errors import DirectoryAccessError
from blogsite.templates.page import ERROR_PAGE
from blogsite.utils.logger import setup_logger

logger = logging.getLogger(__name__)

def create_app(cfg: Config = config) -> FastAPI:
    app = FastAPI(title="SMVDGroup Blog")
    app.dependency_overrides[get_config] = lambda: cfg

    # 注册路由
    app.include_router(blog.router)
    app.include_router(posts.router, prefix="/api/posts")

    @app.get("/health")
    def health():
        return {"ok": True}

    # 目录读取失败时返回完整的错误页面，不输出半个列表
    @app.exception_handler(DirectoryAccessError)
    async def directory_access_error_handler(request: Request, exc: DirectoryAccessError):
        logger.error(f"Blog directory unavailable: {exc.path} ({exc.reason})")
        if request.url.path.startswith("/api/"):
            return JSONResponse(status_code=503, content={"detail": "Blog posts are unavailable."})
        return HTMLResponse(content=ERROR_PAGE, status_code=503)

    # 可选：直接提供博文文件，通常由独立的静态文件服务器负责
    if cfg.SERVE_BLOG_FILES:
        app.mount(
            cfg.BLOG_ASSET_BASE_PATH.rstrip("/") or "/",
            StaticFiles(directory=cfg.BLOG_DIRECTORY_PATH, check_dir=False),
            name="blog-files",
        )

    # 启动初始化
    @app.on_event("startup")
    async def startup_event():
        setup_logger(cfg.LOG_LEVEL, cfg.ENABLE_LOGGING)
        logger.info(f"Server started. Serving posts from {cfg.BLOG_DIRECTORY_PATH}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Server shutting down.")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
