# 从文件名解析标题和作者
# 文件名约定：<标题_用下划线>----<作者>.<扩展名>，例如 My_First_Post----Jane_Doe.html
import logging

from blogsite.models.post import PostEntry, displayable

logger = logging.getLogger(__name__)

TITLE_AUTHOR_DELIMITER = "----"
AUTHOR_TERMINATOR = "."

def parse_post_filename(filename: str) -> PostEntry:
    display = displayable(filename).replace("_", " ")
    if TITLE_AUTHOR_DELIMITER not in display:
        logger.debug(f"No '{TITLE_AUTHOR_DELIMITER}' in {filename!r}, using it as the title")
        return PostEntry(filename=filename, title=display, author="")

    segments = display.split(TITLE_AUTHOR_DELIMITER)
    title = segments[0]
    author = segments[1].split(AUTHOR_TERMINATOR)[0]
    return PostEntry(filename=filename, title=title, author=author)
