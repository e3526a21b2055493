# 博文列表页面（HTML）
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from blogsite.config import Config, get_config
from blogsite.services.directory import DirectoryReader, get_directory_reader
from blogsite.services.renderer import render_blog_page

router = APIRouter()

# /blog.php 保留旧站点的地址
@router.get("/blog", response_class=HTMLResponse)
@router.get("/blog.php", response_class=HTMLResponse)
def blog_page(
    cfg: Config = Depends(get_config),
    read_directory: DirectoryReader = Depends(get_directory_reader),
):
    return render_blog_page(cfg.BLOG_DIRECTORY_PATH, read_directory, cfg.BLOG_ASSET_BASE_PATH)
