"""
Viewer - diff2html page embedding a unified diff document
"""

from __future__ import annotations

import json

HIGHLIGHT_CSS = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/10.7.1/styles/github.min.css"
DIFF2HTML_CSS = "https://cdn.jsdelivr.net/npm/diff2html/bundles/css/diff2html.min.css"
DIFF2HTML_JS = "https://cdn.jsdelivr.net/npm/diff2html/bundles/js/diff2html-ui.min.js"

PAGE_TEMPLATE = """<!doctype html>
<html lang="en-us">
<head>
\t<meta charset="utf-8" />
\t<link rel="stylesheet" href="{highlight_css}" />
\t<link rel="stylesheet" type="text/css" href="{diff2html_css}" />
\t<style>
\t\tbody {{ background-color: #FAFBFC; }}
\t\t.d2h-file-header {{ display: none; }}
\t\t.d2h-info {{ font-size: 21px; }}
\t\t.d2h-cntx, .d2h-change {{ font-size: 18px; }}
\t\t.d2h-code-side-linenumber {{ border: none; }}
\t\ttd.d2h-info div.d2h-code-side-line {{ color: #535353; }}
\t</style>
\t<script type="text/javascript" src="{diff2html_js}"></script>
</head>
<body>
<div id="myDiffElement"></div>
<script>
\tconst diffString = {diff_literal};

\tdocument.addEventListener('DOMContentLoaded', function () {{
\t\tvar targetElement = document.getElementById('myDiffElement');
\t\tvar configuration = {{
\t\t\tdrawFileList: false,
\t\t\toutputFormat: 'side-by-side',
\t\t\thighlight: true,
\t\t\trenderNothingWhenEmpty: true,
\t\t}};

\t\tvar diff2htmlUi = new Diff2HtmlUI(targetElement, diffString, configuration);
\t\tdiff2htmlUi.draw();
\t\tdiff2htmlUi.highlightCode();

\t\tvar headers = document.querySelectorAll("td.d2h-info div.d2h-code-side-line");
\t\tif (headers.length >= 2) {{
\t\t\theaders[0].textContent = "Original";
\t\t\theaders[1].textContent = "New";
\t\t}}
\t}});
</script>
</body>
</html>
"""


def script_literal(text: str) -> str:
    """JS string literal that cannot close the surrounding <script> tag"""
    return (
        json.dumps(text)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def render_page(document: str) -> str:
    """HTML page showing a unified diff document side by side"""
    return PAGE_TEMPLATE.format(
        highlight_css=HIGHLIGHT_CSS,
        diff2html_css=DIFF2HTML_CSS,
        diff2html_js=DIFF2HTML_JS,
        diff_literal=script_literal(document),
    )
