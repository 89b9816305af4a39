# styled_export/inline_css.py

from .config import ClassOrId

# Always appended after the page's own CSS
BASE_CSS = f"""
html, body, body.fillscreen {{
  display: block;
  position: relative;
  height: 100%;
}}
a {{
  pointer-events: auto;
}}
hr {{
  height: 4px;
  padding: 0;
  margin: 16px 0;
  background-color: #e7e7e7;
  border: 0 none;
  overflow: hidden;
  box-sizing: content-box;
}}
.dark hr {{
  background-color: #545454;
}}
.{ClassOrId.AG_HIDE}.{ClassOrId.AG_MATH} > .{ClassOrId.AG_MATH_RENDER} {{
  top: 0;
  position: relative;
  padding: 0;
  color: #000;
  background: transparent;
}}
"""


def build_document(theme_name: str, css: str, body_html: str, title: str = "Mark Text") -> str:
    """Wrap the cleaned CSS and the sanitized editor markup into one page."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        f"  <title>{title}</title>\n"
        "  <style>\n"
        f"{css}\n"
        f"{BASE_CSS}"
        "  </style>\n"
        "</head>\n"
        f'<body class="editor-wrapper fillscreen {theme_name}">\n'
        f"{body_html}\n"
        "</body>\n"
        "</html>\n"
    )
