from fastapi.templating import Jinja2Templates
from pathlib import Path
from typing import Any, Optional
import json
import logging
import os

from .models import ReferenceConfiguration, is_set

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
BROWSER_SCRIPT_PATH = "/@scalar/fastify-api-reference/browser.js"
DEFAULT_BROWSER_SCRIPT = BASE_DIR / "static" / "browser.js"

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def to_json(value: Any) -> str:
    """Compact JSON, same shape the browser would produce with JSON.stringify."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_configuration(configuration: ReferenceConfiguration) -> str:
    """
    JSON for the data-configuration attribute.
    Only double quotes are replaced; other characters are passed through as is.
    """
    return to_json(configuration.to_payload()).replace('"', "&quot;")


def encode_spec_content(configuration: ReferenceConfiguration) -> str:
    spec = configuration.spec
    if spec is None or not is_set(spec.content):
        return ""
    content = spec.content() if callable(spec.content) else spec.content
    return to_json(content)


def render_html(configuration: ReferenceConfiguration) -> str:
    """
    Renders the full HTML document for the API reference page.
    """
    template = templates.get_template("api_reference.html")
    return template.render(
        data_configuration=encode_configuration(configuration),
        spec_content=encode_spec_content(configuration),
        browser_script_path=BROWSER_SCRIPT_PATH,
    )


def load_browser_script(path: Optional[str] = None) -> str:
    """
    Reads the pre-built client script.

    Uses `path` if given, then API_REFERENCE_BROWSER_JS, then the script
    bundled with the package.
    """
    script_path = Path(path or os.getenv("API_REFERENCE_BROWSER_JS") or DEFAULT_BROWSER_SCRIPT)
    logger.info(f"Loading API reference client script from {script_path}")
    return script_path.read_text(encoding="utf-8")
