from .models import ApiReferenceOptions, ReferenceConfiguration, SpecSource
from .resolver import DEFAULT_CSS, ConfigurationCell, resolve_configuration
from .router import create_api_reference_router, register_api_reference
from .services.spec_provider import FastAPISpecProvider, SpecProvider, detect_spec_provider
from .utils import BROWSER_SCRIPT_PATH, load_browser_script, render_html

__all__ = [
    "ApiReferenceOptions",
    "BROWSER_SCRIPT_PATH",
    "ConfigurationCell",
    "DEFAULT_CSS",
    "FastAPISpecProvider",
    "ReferenceConfiguration",
    "SpecProvider",
    "SpecSource",
    "create_api_reference_router",
    "detect_spec_provider",
    "load_browser_script",
    "register_api_reference",
    "render_html",
    "resolve_configuration",
]
