# 页面固定的头部和尾部
from pydantic import BaseModel

HEADER = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width">
  <title>SMVDGroup</title>
  <link rel="stylesheet" href="style.css">
</head>
<body>
  <div class="topnav">
    <a href="home.html"><b>SMVDGroup</b></a>
    <a href="publications.html">Publications</a>
    <a href="members.html">Members</a>
    <a class="active" href="blog.php">Blog</a>
    <a href="contact.html">Contact</a>
  </div>
  <div id="particles-js">
    <div id="displaybox">
      <h1>Blog Posts</h1>
      <hr>
"""

FOOTER = """    </div>
  </div>
  <!-- scripts -->
  <script src="js/particles.js"></script>
  <script src="js/app.js"></script>
  <div id="footer">
    <p class="footer-text"><b>Site coded by Miles McGibbon using particles.js &amp; highlight.js</b></p>
  </div>
</body>
</html>
"""

ERROR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>SMVDGroup</title>
  <link rel="stylesheet" href="style.css">
</head>
<body>
  <div id="displaybox">
    <h1>Blog Posts</h1>
    <p>The blog posts are unavailable right now. Please try again later.</p>
  </div>
</body>
</html>
"""

class PageTemplate(BaseModel):
    header: str = HEADER
    footer: str = FOOTER

    def compose(self, fragments: list[str]) -> str:
        return self.header + "".join(fragments) + self.footer

DEFAULT_TEMPLATE = PageTemplate()
