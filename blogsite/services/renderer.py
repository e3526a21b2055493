# 生成博文列表页面
import html
import logging

from blogsite.config import config
from blogsite.models.post import PostEntry, displayable
from blogsite.services.directory import DirectoryReader, list_directory, read_post_filenames
from blogsite.services.parser import parse_post_filename
from blogsite.templates.page import DEFAULT_TEMPLATE, PageTemplate

logger = logging.getLogger(__name__)

FRAGMENT = """      <div class="post-entry">
        <h2><b>{title}</b></h2>
        <p>{author}</p>
        <a class="clean-link" href="{href}"><p>Read this post</p></a>
      </div>
      <hr>
"""

def collect_posts(directory: str, read_directory: DirectoryReader = list_directory) -> list[PostEntry]:
    return [parse_post_filename(name) for name in read_post_filenames(directory, read_directory)]

def render_post_fragment(post: PostEntry, base_path: str) -> str:
    return FRAGMENT.format(
        title=html.escape(displayable(post.title)),
        author=html.escape(displayable(post.author)),
        href=html.escape(post.href(base_path), quote=True),
    )

def render_blog_page(
    directory: str,
    read_directory: DirectoryReader = list_directory,
    base_path: str = config.BLOG_ASSET_BASE_PATH,
    template: PageTemplate = DEFAULT_TEMPLATE,
) -> str:
    """
    渲染完整的博文列表页面。
    先读取全部条目再拼接页面，目录读取失败时 DirectoryAccessError 直接向上抛出，不会输出半个页面。
    """
    posts = collect_posts(directory, read_directory)
    fragments = [render_post_fragment(post, base_path) for post in posts]
    logger.info(f"Rendered blog page with {len(posts)} posts from {directory}")
    return template.compose(fragments)
