"""
api_client.py — single HTTP client for all frontend → Flask communication.
Reads API_BASE_URL from .env (falls back to localhost:5000).
Always attaches the JWT access token stored in st.session_state.
"""
import os
import requests
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")


class APIError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def _headers(token: str | None = None) -> dict:
    h = {"Content-Type": "application/json"}
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


def _raise(resp: requests.Response) -> None:
    if not resp.ok:
        try:
            msg = resp.json().get("error", resp.text)
        except ValueError:
            msg = resp.text
        raise APIError(msg, resp.status_code)


def _request(method: str, path: str, token: str | None = None,
             timeout: int = 30, **kwargs) -> requests.Response:
    """Send one request; network failures surface as APIError(status_code=0)."""
    try:
        resp = requests.request(
            method,
            f"{API_BASE_URL}{path}",
            headers=_headers(token),
            timeout=timeout,
            **kwargs,
        )
    except requests.RequestException as exc:
        raise APIError(f"could not reach the server: {exc}") from exc
    _raise(resp)
    return resp


# ── Auth ─────────────────────────────────────────────────────────────────────

def register(email: str, password: str, name: str | None = None) -> dict:
    return _request(
        "POST", "/api/auth/register",
        json={"email": email, "password": password, "name": name},
        timeout=10,
    ).json()


def login(email: str, password: str) -> dict:
    return _request(
        "POST", "/api/auth/login",
        json={"email": email, "password": password},
        timeout=10,
    ).json()


def refresh_token(refresh_tok: str) -> str:
    return _request("POST", "/api/auth/refresh", refresh_tok, timeout=10).json()["access_token"]


def get_me(access_token: str) -> dict:
    return _request("GET", "/api/auth/me", access_token, timeout=10).json()["user"]


# ── Quizzes & results ────────────────────────────────────────────────────────

def get_dashboard(access_token: str) -> dict:
    return _request("GET", "/api/dashboard", access_token).json()


def load_sample_quizzes(access_token: str) -> dict:
    return _request("POST", "/api/quizzes/sample", access_token, json={}).json()


def get_quiz(quiz_id: str, access_token: str) -> dict:
    """Returns {"quiz": QuizDict, "questions": [QuestionDict, ...]}."""
    return _request("GET", f"/api/quizzes/{quiz_id}", access_token).json()


def submit_answers(quiz_id: str, answers: list[int], access_token: str) -> dict:
    return _request(
        "POST", f"/api/quizzes/{quiz_id}/submissions", access_token,
        json={"answers": answers},
    ).json()


def get_result(result_id: str, access_token: str) -> dict:
    return _request("GET", f"/api/results/{result_id}", access_token).json()


def get_certificate_png(result_id: str, access_token: str) -> bytes:
    return _request("GET", f"/api/results/{result_id}/certificate.png", access_token).content


def get_certificate_pdf(result_id: str, access_token: str) -> bytes:
    return _request("GET", f"/api/results/{result_id}/certificate.pdf", access_token).content
