"""Browser query console served on ``GET /``."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["console"])


@router.get("/", response_class=HTMLResponse)
async def console() -> HTMLResponse:
    """GraphQL Playground pointed at this server."""
    return HTMLResponse(render_console_html(endpoint="/", subscription_endpoint="/"))


def render_console_html(endpoint: str, subscription_endpoint: str) -> str:
    """Return the console page configured for the given endpoints."""
    return (
        _CONSOLE_HTML.replace("__ENDPOINT__", endpoint)
        .replace("__SUBSCRIPTION_ENDPOINT__", subscription_endpoint)
    )


_CONSOLE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Share Playground</title>
    <link
      rel="stylesheet"
      href="https://cdn.jsdelivr.net/npm/graphql-playground-react/build/static/css/index.css"
    />
    <link
      rel="shortcut icon"
      href="https://cdn.jsdelivr.net/npm/graphql-playground-react/build/favicon.png"
    />
    <script src="https://cdn.jsdelivr.net/npm/graphql-playground-react/build/static/js/middleware.js"></script>
    <style>
      body { margin: 0; overflow: hidden; font-family: ui-sans-serif, system-ui, sans-serif; }
      #loading { padding: 2rem; color: #888; }
    </style>
  </head>
  <body>
    <div id="root"><div id="loading">Loading playground...</div></div>
    <script>
      window.addEventListener('load', function () {
        GraphQLPlayground.init(document.getElementById('root'), {
          endpoint: '__ENDPOINT__',
          subscriptionEndpoint: '__SUBSCRIPTION_ENDPOINT__'
        });
      });
    </script>
  </body>
</html>
"""
