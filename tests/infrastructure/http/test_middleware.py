from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from cookie_signature.application.verify_cookies import CookieSignatureOptions
from cookie_signature.errors import MiddlewareRequiredError
from cookie_signature.infrastructure.http.accessors import get_verified_cookie, middleware_was_used
from cookie_signature.infrastructure.http.middleware import (
    cookie_signature_middleware,
    install_cookie_signature_handlers,
    require_signed_cookies,
)
from cookie_signature.signature import SecretKey
from tests.fakes import BASSFREQ, CAZ, CAZ_FORGED


def _cookie_header(**cookies: str) -> dict[str, str]:
    return {"cookie": "; ".join(f"{name}={value}" for name, value in cookies.items())}


def _middleware_app(secret: SecretKey) -> FastAPI:
    app = FastAPI()
    app.middleware("http")(
        cookie_signature_middleware(CookieSignatureOptions(secret=secret, cookies=["bassfreq", "caz"]))
    )

    @app.get("/cookie")
    async def cookie(request: Request) -> dict[str, object]:
        return {
            "bassfreq": get_verified_cookie(request, "bassfreq"),
            "caz": get_verified_cookie(request, "caz"),
            "mahiro": get_verified_cookie(request, "mahiro"),
            "middleware_used": middleware_was_used(request),
        }

    return app


def test_middleware_rejects_missing_cookie(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie")

    assert response.status_code == 400
    assert response.json() == {"message": "Cookie(bassfreq) is required."}


def test_middleware_reports_first_missing_name_in_order(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie", headers=_cookie_header(bassfreq=BASSFREQ))

    assert response.status_code == 400
    assert response.json() == {"message": "Cookie(caz) is required."}


def test_middleware_rejects_malformed_cookie(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie", headers=_cookie_header(bassfreq="rawstyle", caz="BCM"))

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid cookie value"}


def test_middleware_rejects_undecodable_segment(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie", headers=_cookie_header(bassfreq="Um+3c3R5bGU.abc", caz=CAZ))

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid cookie value"}


def test_middleware_rejects_invalid_signature(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ_FORGED))

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid signature"}


def test_middleware_passes_verified_values_to_handler(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    response = client.get("/cookie", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ))

    assert response.status_code == 200
    assert response.json() == {
        "bassfreq": "Rawstyle",
        "caz": "MEGATON KICK",
        "mahiro": None,
        "middleware_used": True,
    }


def test_verified_cookies_do_not_leak_between_requests(secret: SecretKey) -> None:
    client = TestClient(_middleware_app(secret))

    first = client.get("/cookie", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ))
    second = client.get("/cookie", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ_FORGED))

    assert first.status_code == 200
    assert second.status_code == 401


def test_get_verified_cookie_without_middleware_is_a_misuse() -> None:
    app = FastAPI()

    @app.get("/unguarded")
    async def unguarded(request: Request) -> dict[str, object]:
        try:
            get_verified_cookie(request, "bassfreq")
        except MiddlewareRequiredError as exc:
            return {"error": type(exc).__name__, "middleware_used": middleware_was_used(request)}
        return {"error": None}

    response = TestClient(app).get("/unguarded", headers=_cookie_header(bassfreq=BASSFREQ))

    assert response.json() == {"error": "MiddlewareRequiredError", "middleware_used": False}


def _dependency_app(secret: SecretKey) -> FastAPI:
    app = FastAPI()
    install_cookie_signature_handlers(app)
    guard = require_signed_cookies(CookieSignatureOptions(secret=secret, cookies=["bassfreq", "caz"]))

    @app.get("/guarded", dependencies=[Depends(guard)])
    async def guarded(request: Request) -> dict[str, object]:
        return {"caz": get_verified_cookie(request, "caz")}

    @app.get("/open")
    async def open_route(request: Request) -> dict[str, object]:
        return {"middleware_used": middleware_was_used(request)}

    return app


def test_dependency_renders_rejections_like_middleware(secret: SecretKey) -> None:
    client = TestClient(_dependency_app(secret))

    missing = client.get("/guarded")
    malformed = client.get("/guarded", headers=_cookie_header(bassfreq="rawstyle", caz=CAZ))
    forged = client.get("/guarded", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ_FORGED))

    assert (missing.status_code, missing.json()) == (400, {"message": "Cookie(bassfreq) is required."})
    assert (malformed.status_code, malformed.json()) == (400, {"message": "Invalid cookie value"})
    assert (forged.status_code, forged.json()) == (401, {"message": "Invalid signature"})


def test_dependency_guards_only_its_route(secret: SecretKey) -> None:
    client = TestClient(_dependency_app(secret))

    guarded = client.get("/guarded", headers=_cookie_header(bassfreq=BASSFREQ, caz=CAZ))
    open_response = client.get("/open")

    assert guarded.status_code == 200
    assert guarded.json() == {"caz": "MEGATON KICK"}
    assert open_response.status_code == 200
    assert open_response.json() == {"middleware_used": False}
