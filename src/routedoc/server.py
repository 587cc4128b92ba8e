"""Documentation server: serves the synthesized document and a Swagger UI page."""

import logging
import posixpath
import re
import secrets

import fastapi
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from routedoc.config import BasicAuth, DocConfig
from routedoc.descriptor.base import RouteDescriptor
from routedoc.synth.document import synthesize

logger = logging.getLogger(__name__)

MIN_FASTAPI_VERSION = (0, 100)

_basic = HTTPBasic(auto_error=False)


class HostCompatibilityError(RuntimeError):
    """The host framework is too old to mount the documentation app."""


def _version_tuple(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in re.findall(r"\d+", version)[:3])


def check_host_version(version: str | None = None) -> None:
    version = version or fastapi.__version__
    if _version_tuple(version) < MIN_FASTAPI_VERSION:
        required = ".".join(str(v) for v in MIN_FASTAPI_VERSION)
        raise HostCompatibilityError(
            f"FastAPI {version} is not supported, {required} or newer is required"
        )


def basic_auth_gate(auth: BasicAuth | None):
    """Return a dependency enforcing `auth`, or None when the gate is disabled."""
    if auth is None:
        return None
    if not auth.enabled:
        logger.warning("Incomplete basic auth credentials, documentation is not protected")
        return None

    expected_name = auth.name.encode("utf-8")
    expected_pass = auth.password.encode("utf-8")

    def verify(credentials: HTTPBasicCredentials | None = Depends(_basic)) -> None:
        if credentials is not None:
            name_ok = secrets.compare_digest(credentials.username.encode("utf-8"), expected_name)
            pass_ok = secrets.compare_digest(credentials.password.encode("utf-8"), expected_pass)
            if name_ok and pass_ok:
                return
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )

    return verify


def create_doc_app(document: dict, config_url: str, basic_auth: BasicAuth | None = None) -> FastAPI:
    """Create the documentation sub-application for an already built document."""
    gate = basic_auth_gate(basic_auth)
    app = FastAPI(
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        dependencies=[Depends(gate)] if gate else None,
    )
    app.state.document = document

    @app.get("/config")
    def config():
        return JSONResponse(app.state.document)

    @app.get("/")
    def index():
        title = app.state.document.get("info", {}).get("title", "")
        return get_swagger_ui_html(openapi_url=config_url, title=title)

    return app


def mount_docs(app: FastAPI, routes: list[RouteDescriptor], config: DocConfig | None = None) -> dict:
    """Synthesize the document once and mount the documentation app on `app`.

    Returns the synthesized document.
    """
    config = config or DocConfig()
    check_host_version()

    document = synthesize(routes, config)
    mount_at = "/" + config.mount_path.strip("/")
    config_url = posixpath.join(config.app_path, config.mount_path, "config")

    app.mount(mount_at, create_doc_app(document, config_url, config.basic_auth), name=config.mount_path)
    logger.info("Mounted documentation for %d paths at %s", len(document["paths"]), mount_at)
    return document
