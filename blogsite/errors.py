# 错误类型
class DirectoryAccessError(Exception):
    """博文目录不存在或不可读时抛出。"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read blog directory {path}: {reason}")
