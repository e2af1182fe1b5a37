# addresscompare/entrypoints/api/routers/web.py
from __future__ import annotations

import html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ....config import settings

router = APIRouter(tags=["web"])

_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <style>
    body {{ font-family: system-ui, sans-serif; background: #f3f4f6; margin: 0; padding: 3rem 1rem; }}
    main {{ max-width: 42rem; margin: 0 auto; }}
    h1 {{ text-align: center; margin-bottom: .5rem; }}
    .lead {{ text-align: center; color: #4b5563; margin-top: 0; }}
    .card {{ background: #fff; border-radius: .5rem; padding: 1.5rem; box-shadow: 0 1px 3px rgba(0,0,0,.1); }}
    label {{ display: block; font-size: .875rem; font-weight: 500; margin: 1rem 0 .25rem; }}
    input {{ width: 100%; box-sizing: border-box; padding: .5rem; border: 1px solid #d1d5db; border-radius: .375rem; }}
    button {{ width: 100%; margin-top: 1.5rem; padding: .6rem; border: 0; border-radius: .375rem; background: #111827; color: #fff; cursor: pointer; }}
    button:disabled {{ opacity: .5; cursor: not-allowed; }}
    #result {{ margin-top: 1.5rem; padding: 1rem; border-radius: .375rem; }}
    #result.match {{ background: #ecfdf5; color: #065f46; }}
    #result.different {{ background: #fffbeb; color: #92400e; }}
    #result.error {{ background: #fef2f2; color: #991b1b; }}
  </style>
</head>
<body>
<main>
  <h1>{title}</h1>
  <p class="lead">Compare two addresses and see how similar they are</p>
  <div class="card">
    <form id="compare-form">
      <label for="address1">First Address</label>
      <input id="address1" name="address1" placeholder="Enter first address" autocomplete="off">
      <label for="address2">Second Address</label>
      <input id="address2" name="address2" placeholder="Enter second address" autocomplete="off">
      <button id="compare" type="submit" disabled>Compare Addresses</button>
    </form>
    <div id="result" hidden></div>
  </div>
</main>
<script>
  const form = document.getElementById("compare-form");
  const a1 = document.getElementById("address1");
  const a2 = document.getElementById("address2");
  const btn = document.getElementById("compare");
  const out = document.getElementById("result");
  let loading = false;

  function sync() {{
    btn.disabled = loading || !a1.value.trim() || !a2.value.trim();
    btn.textContent = loading ? "Comparing..." : "Compare Addresses";
  }}

  function show(kind, lines) {{
    out.className = kind;
    out.replaceChildren(...lines.map((text, i) => {{
      const el = document.createElement(i === 0 ? "strong" : "p");
      el.textContent = text;
      return el;
    }}));
    out.hidden = false;
  }}

  a1.addEventListener("input", sync);
  a2.addEventListener("input", sync);

  form.addEventListener("submit", async (ev) => {{
    ev.preventDefault();
    loading = true;
    sync();
    try {{
      const resp = await fetch("/api/compare-addresses", {{
        method: "POST",
        headers: {{ "Content-Type": "application/json" }},
        body: JSON.stringify({{ address1: a1.value, address2: a2.value }}),
      }});
      const data = await resp.json();
      if (data.error) {{
        show("error", [data.error, data.details || ""]);
      }} else {{
        show(data.match ? "match" : "different", [
          data.match ? "Addresses Match" : "Addresses Differ",
          "Similarity: " + data.matchPercentage + "%",
          data.details,
        ]);
      }}
    }} catch (err) {{
      show("error", ["Failed to compare addresses. Please try again."]);
    }} finally {{
      loading = false;
      sync();
    }}
  }});
</script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index() -> HTMLResponse:
    return HTMLResponse(_PAGE.format(title=html.escape(settings.APP_TITLE)))
