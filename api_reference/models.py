from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class SpecSource(BaseModel):
    """
    Where the viewer gets the OpenAPI document from.

    `content` is either the document itself (dict or JSON/YAML string) or a
    zero-argument callable returning it. `url` points the client at a remote
    document instead.
    """

    model_config = ConfigDict(extra="allow")

    content: Optional[Any] = None
    url: Optional[str] = None


class ReferenceConfiguration(BaseModel):
    """
    Configuration handed to the browser client as JSON.

    Only a subset of the client options is typed here; anything else is kept
    as an extra field and forwarded untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    spec: Optional[SpecSource] = None
    custom_css: Optional[str] = Field(None, alias="customCss")
    theme: Optional[str] = None
    layout: Optional[str] = None
    proxy: Optional[str] = None
    is_editable: Optional[bool] = Field(None, alias="isEditable")
    show_sidebar: Optional[bool] = Field(None, alias="showSidebar")
    hide_models: Optional[bool] = Field(None, alias="hideModels")
    hide_download_button: Optional[bool] = Field(None, alias="hideDownloadButton")
    dark_mode: Optional[bool] = Field(None, alias="darkMode")
    search_hot_key: Optional[str] = Field(None, alias="searchHotKey")
    meta_data: Optional[dict] = Field(None, alias="metaData")
    hidden_clients: Optional[Any] = Field(None, alias="hiddenClients")
    base_server_url: Optional[str] = Field(None, alias="baseServerURL")
    servers: Optional[list] = None
    authentication: Optional[dict] = None
    with_default_fonts: Optional[bool] = Field(None, alias="withDefaultFonts")
    favicon: Optional[str] = None

    def to_payload(self) -> dict:
        """
        JSON-ready dict using the client's camelCase keys.
        Unset options and callables (e.g. a lazy spec.content) are left out.
        """
        return _drop_callables(self.model_dump(by_alias=True, exclude_none=True))


def is_set(value: Any) -> bool:
    """
    Whether an option counts as supplied. Empty dicts and lists are a
    supplied (if empty) document; None, "", 0 and False are not.
    """
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


class ApiReferenceOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    route_prefix: str = Field("/", alias="routePrefix")
    configuration: Optional[ReferenceConfiguration] = None


def _drop_callables(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: _drop_callables(item)
            for key, item in value.items()
            if not callable(item)
        }
    if isinstance(value, list):
        return [_drop_callables(item) for item in value if not callable(item)]
    return value
