# 数据结构（Pydantic）
import os
from urllib.parse import quote

from pydantic import BaseModel, field_serializer

def displayable(text: str) -> str:
	# 无法解码的文件名字节（代理字符）显示为 U+FFFD
	return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

class PostEntry(BaseModel):
	filename: str # 磁盘上的原始文件名
	title: str
	author: str # 没有 "----" 时为空字符串

	def href(self, base_path: str) -> str:
		# 按磁盘上的原始字节编码链接
		return f"{base_path.rstrip('/')}/{quote(os.fsencode(self.filename))}"

	@field_serializer("filename")
	def serialize_filename(self, filename: str) -> str:
		return displayable(filename)
