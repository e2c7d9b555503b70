from fastapi import APIRouter, FastAPI, Response
from fastapi.responses import HTMLResponse
from typing import Optional, Union
import logging

from .models import ApiReferenceOptions
from .resolver import ConfigurationCell, can_render
from .services.spec_provider import SpecProvider, detect_spec_provider
from .utils import BROWSER_SCRIPT_PATH, load_browser_script, render_html

logger = logging.getLogger(__name__)

MISSING_SPEC_WARNING = (
    "[api-reference] You didn't provide a spec.content or spec.url and the app "
    "doesn't generate an OpenAPI document either. Please provide one of these options."
)


def create_api_reference_router(
    options: Union[ApiReferenceOptions, dict, None] = None,
    spec_provider: Optional[SpecProvider] = None,
) -> Optional[APIRouter]:
    """
    Build the router serving the API reference page and its client script.

    Returns None (and logs a warning) when there is nothing to render: no
    spec.content, no spec.url and no spec provider. Both routes are left out
    of the app's own OpenAPI document.
    """
    options = ApiReferenceOptions.model_validate(options or {})

    if not can_render(options.configuration, spec_provider):
        logger.warning(MISSING_SPEC_WARNING)
        return None

    # Read once, served from memory for the lifetime of the process
    script_content = load_browser_script()
    cell = ConfigurationCell(options.configuration)

    router = APIRouter()

    @router.get(options.route_prefix, response_class=HTMLResponse, include_in_schema=False)
    async def api_reference_ui():
        configuration = cell.fill_if_absent(spec_provider)
        return HTMLResponse(render_html(configuration))

    @router.get(BROWSER_SCRIPT_PATH, include_in_schema=False)
    async def api_reference_script():
        return Response(
            content=script_content,
            media_type="application/javascript; charset=utf-8",
        )

    return router


def find_route_conflicts(app: FastAPI, options: ApiReferenceOptions) -> list:
    """Paths the reference routes would need that the app already serves."""
    existing = {getattr(route, "path", None) for route in app.routes}
    return [
        path
        for path in (options.route_prefix, BROWSER_SCRIPT_PATH)
        if path in existing
    ]


def register_api_reference(
    app: FastAPI,
    options: Union[ApiReferenceOptions, dict, None] = None,
    spec_provider: Optional[SpecProvider] = None,
    **kwargs,
) -> bool:
    """
    Mount the API reference on `app`.

    Options can be passed as an ApiReferenceOptions, a dict, keyword
    arguments (route_prefix=..., configuration=...), or both, in which case
    the keyword arguments take precedence. Without an explicit spec_provider
    the app's own OpenAPI generator is used when it has one.
    Returns False when the routes were not registered.
    """
    options = ApiReferenceOptions.model_validate(options or {})
    if kwargs:
        overrides = ApiReferenceOptions.model_validate(kwargs)
        options = options.model_copy(
            update={name: getattr(overrides, name) for name in overrides.model_fields_set}
        )
    if spec_provider is None:
        spec_provider = detect_spec_provider(app)

    conflicts = find_route_conflicts(app, options)
    if conflicts:
        logger.warning(
            f"[api-reference] The app already serves {', '.join(conflicts)}. "
            "Pick another route_prefix or disable the conflicting route "
            "(e.g. FastAPI(docs_url=None) for /docs)."
        )
        return False

    router = create_api_reference_router(options, spec_provider)
    if router is None:
        return False

    app.include_router(router)
    logger.info(f"API reference available at {options.route_prefix}")
    return True
