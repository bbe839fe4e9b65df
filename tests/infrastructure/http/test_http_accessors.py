from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

from cookie_signature.application.verify_cookies import CookieSignatureOptions
from cookie_signature.domain.cookie import CookieOptions
from cookie_signature.errors import AlreadyVerifiedError
from cookie_signature.infrastructure.http.accessors import (
    get_cookie,
    set_cookie_with_signature,
)
from cookie_signature.infrastructure.http.middleware import cookie_signature_middleware
from cookie_signature.signature import SecretKey
from tests.fakes import BASSFREQ, HELLO_WORLD


def test_set_cookie_with_signature_writes_signed_header(secret: SecretKey) -> None:
    app = FastAPI()
    set_cookie = set_cookie_with_signature(secret)

    @app.post("/set-cookie")
    async def set_cookie_route(response: Response) -> dict[str, int]:
        signature = await set_cookie(response, "foo", "bar", CookieOptions(httponly=True))
        return {"signature_length": len(signature)}

    response = TestClient(app).post("/set-cookie")

    assert response.status_code == 200
    assert response.json() == {"signature_length": 32}
    assert response.headers["set-cookie"] == "foo=YmFy.WS-00fQOWmPL9s2SsjelfXb3OWTYOvD2h_rHbkN2ZQw; HttpOnly"


def test_get_cookie_verifies_independently(secret: SecretKey) -> None:
    app = FastAPI()

    @app.get("/")
    async def read(request: Request) -> dict[str, str | None]:
        return {
            name: await get_cookie(request, secret, name)
            for name in ("correct", "invalid-format", "invalid-signature", "not-found")
        }

    cookie = "; ".join(
        [
            f"correct={HELLO_WORLD}",
            "invalid-format=QmFzc2ZyZXE:zrSxFiL_eKqF5LpRfczrpSamQolHg0T6zkvqsJCqDWM",
            "invalid-signature=QmFzc2ZyZXE.zrSxFiL_eKqF5LpRfczrpSamQolHg0T6zkvqsJCqDWW",
        ]
    )
    response = TestClient(app).get("/", headers={"cookie": cookie})

    assert response.json() == {
        "correct": "Hello World!",
        "invalid-format": None,
        "invalid-signature": None,
        "not-found": None,
    }


def test_get_cookie_after_middleware_requires_ignore_flag(secret: SecretKey) -> None:
    app = FastAPI()
    app.middleware("http")(cookie_signature_middleware(CookieSignatureOptions(secret=secret, cookies=["bassfreq"])))

    @app.get("/")
    async def read(request: Request) -> dict[str, str | None]:
        try:
            await get_cookie(request, secret, "bassfreq")
        except AlreadyVerifiedError:
            guarded = "AlreadyVerifiedError"
        else:
            guarded = None
        return {
            "guarded": guarded,
            "manual": await get_cookie(request, secret, "bassfreq", ignore_middleware=True),
        }

    response = TestClient(app).get("/", headers={"cookie": f"bassfreq={BASSFREQ}"})

    assert response.json() == {"guarded": "AlreadyVerifiedError", "manual": "Rawstyle"}


def test_signed_cookie_round_trips_through_client(secret: SecretKey) -> None:
    app = FastAPI()
    set_cookie = set_cookie_with_signature(secret)

    @app.post("/login")
    async def login(response: Response) -> dict[str, bool]:
        await set_cookie(response, "session_id", "user-42", CookieOptions(path="/", samesite="lax"))
        return {"ok": True}

    @app.get("/me")
    async def me(request: Request) -> dict[str, str | None]:
        return {"session_id": await get_cookie(request, secret, "session_id")}

    login_response = TestClient(app).post("/login")
    raw_value = login_response.headers["set-cookie"].split(";")[0].split("=", 1)[1]

    response = TestClient(app).get("/me", headers={"cookie": f"session_id={raw_value}"})

    assert login_response.headers["set-cookie"].endswith("; Path=/; SameSite=Lax")
    assert response.json() == {"session_id": "user-42"}
