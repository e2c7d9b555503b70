from typing import Optional
import logging

from .models import ReferenceConfiguration, SpecSource, is_set
from .services.spec_provider import SpecProvider

logger = logging.getLogger(__name__)

# Styling used when the caller sets neither customCss nor theme.
# The page toggles .light-mode / .dark-mode, this only defines the variables.
DEFAULT_CSS = """
:root {
  --theme-font: 'Inter', var(--system-fonts);
}

.light-mode {
  color-scheme: light;
  --theme-color-1: #1c1e21;
  --theme-color-2: #757575;
  --theme-color-3: #8e8e8e;
  --theme-color-disabled: #b4b1b1;
  --theme-color-ghost: #a7a7a7;
  --theme-color-accent: #2f8555;
  --theme-background-1: #fff;
  --theme-background-2: #f5f5f5;
  --theme-background-3: #ededed;
  --theme-background-4: rgba(0, 0, 0, 0.06);
  --theme-background-accent: #2f85551f;

  --theme-border-color: rgba(0, 0, 0, 0.1);
  --theme-scrollbar-color: rgba(0, 0, 0, 0.18);
  --theme-scrollbar-color-active: rgba(0, 0, 0, 0.36);
  --theme-lifted-brightness: 1;
  --theme-backdrop-brightness: 1;

  --theme-shadow-1: 0 1px 3px 0 rgba(0, 0, 0, 0.11);
  --theme-shadow-2: rgba(0, 0, 0, 0.08) 0px 13px 20px 0px,
    rgba(0, 0, 0, 0.08) 0px 3px 8px 0px, #eeeeed 0px 0 0 1px;

  --theme-button-1: rgb(49 53 56);
  --theme-button-1-color: #fff;
  --theme-button-1-hover: rgb(28 31 33);

  --theme-color-green: #007300;
  --theme-color-red: #af272b;
  --theme-color-yellow: #b38200;
  --theme-color-blue: #3b8ba5;
  --theme-color-orange: #fb892c;
  --theme-color-purple: #5203d1;
}

.dark-mode {
  color-scheme: dark;
  --theme-color-1: rgba(255, 255, 255, 0.9);
  --theme-color-2: rgba(255, 255, 255, 0.62);
  --theme-color-3: rgba(255, 255, 255, 0.44);
  --theme-color-disabled: rgba(255, 255, 255, 0.34);
  --theme-color-ghost: rgba(255, 255, 255, 0.26);
  --theme-color-accent: #27c2a0;
  --theme-background-1: #1b1b1d;
  --theme-background-2: #242526;
  --theme-background-3: #3b3b3b;
  --theme-background-4: rgba(255, 255, 255, 0.06);
  --theme-background-accent: #27c2a01f;

  --theme-border-color: rgba(255, 255, 255, 0.1);
  --theme-scrollbar-color: rgba(255, 255, 255, 0.24);
  --theme-scrollbar-color-active: rgba(255, 255, 255, 0.48);
  --theme-lifted-brightness: 1.45;
  --theme-backdrop-brightness: 0.5;

  --theme-shadow-1: 0 1px 3px 0 rgb(0, 0, 0, 0.1);
  --theme-shadow-2: rgba(15, 15, 15, 0.2) 0px 3px 6px,
    rgba(15, 15, 15, 0.4) 0px 9px 24px, 0 0 0 1px rgba(255, 255, 255, 0.1);

  --theme-button-1: #f6f6f6;
  --theme-button-1-color: #000;
  --theme-button-1-hover: #e7e7e7;

  --theme-color-green: #26b226;
  --theme-color-red: #fb565b;
  --theme-color-yellow: #ffc426;
  --theme-color-blue: #6ecfef;
  --theme-color-orange: #ff8d4d;
  --theme-color-purple: #b191f9;
}
.scalar-card:nth-of-type(3) {
  display: none;
}
"""


def has_spec_source(configuration: Optional[ReferenceConfiguration]) -> bool:
    if configuration is None or configuration.spec is None:
        return False
    return is_set(configuration.spec.content) or is_set(configuration.spec.url)


def can_render(
    configuration: Optional[ReferenceConfiguration],
    spec_provider: Optional[SpecProvider] = None,
) -> bool:
    """False when there is neither a configured spec nor a provider to fall back on."""
    return has_spec_source(configuration) or spec_provider is not None


def resolve_configuration(
    configuration: Optional[ReferenceConfiguration],
    spec_provider: Optional[SpecProvider] = None,
) -> ReferenceConfiguration:
    """
    Apply the fallbacks to a configuration and return the effective one.

    - no spec.content / spec.url but a provider is available: spec.content
      becomes the provider's get_spec, called at render time
    - neither customCss nor theme set: customCss becomes DEFAULT_CSS

    The caller's object is never modified. When nothing needs filling in the
    same object is returned, so callers can detect a no-op by identity.
    """
    resolved = configuration if configuration is not None else ReferenceConfiguration()
    updates = {}

    if not has_spec_source(resolved) and spec_provider is not None:
        if resolved.spec is None:
            updates["spec"] = SpecSource(content=spec_provider.get_spec)
        else:
            updates["spec"] = resolved.spec.model_copy(
                update={"content": spec_provider.get_spec}
            )

    if not resolved.custom_css and not resolved.theme:
        updates["custom_css"] = DEFAULT_CSS

    if not updates:
        return resolved
    return resolved.model_copy(update=updates)


class ConfigurationCell:
    """
    Holds the configuration for one registration of the reference routes.

    Every request calls fill_if_absent(); once the fallbacks have been applied
    the stored configuration already satisfies them and later calls are no-ops.
    """

    def __init__(self, configuration: Optional[ReferenceConfiguration] = None):
        self._configuration = configuration

    def get(self) -> Optional[ReferenceConfiguration]:
        return self._configuration

    def fill_if_absent(
        self, spec_provider: Optional[SpecProvider] = None
    ) -> ReferenceConfiguration:
        current = self._configuration
        resolved = resolve_configuration(current, spec_provider)
        if resolved is not current:
            logger.debug("Applied default API reference configuration")
            self._configuration = resolved
        return resolved
