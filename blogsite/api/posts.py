# 博文列表接口（JSON）
from fastapi import APIRouter, Depends

from blogsite.config import Config, get_config
from blogsite.models.post import PostEntry
from blogsite.services.directory import DirectoryReader, get_directory_reader
from blogsite.services.renderer import collect_posts

router = APIRouter()

@router.get("/", response_model=list[PostEntry])
def list_posts(
    cfg: Config = Depends(get_config),
    read_directory: DirectoryReader = Depends(get_directory_reader),
):
    return collect_posts(cfg.BLOG_DIRECTORY_PATH, read_directory)
