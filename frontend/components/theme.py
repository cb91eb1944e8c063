"""theme.py — shared page CSS (dark palette) and the auth guard."""
import streamlit as st

_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

html, body, [class*="css"] {
    font-family: 'Inter', system-ui, sans-serif;
    background-color: #0B1220;
    color: #E6EAF2;
}
.stApp { background-color: #0B1220; }

.dash-card {
    background: #111B2E;
    border: 1px solid #22304A;
    border-radius: 12px;
    padding: 1.2rem 1.4rem;
    margin-bottom: 0.6rem;
}
.dash-card h3 { color: #E6EAF2; margin-bottom: 0.4rem; }
.dash-card p  { color: #A7B0C0; margin: 0; font-size: 0.9rem; }

.badge {
    display: inline-block;
    border-radius: 6px;
    padding: 0.15rem 0.6rem;
    font-size: 0.75rem;
    font-weight: 600;
    margin-left: 0.5rem;
    color: #E6EAF2;
}
.badge-pass { background: #1f9d55; }
.badge-fail { background: #c53030; }

.muted { color: #A7B0C0; font-size: 0.9rem; }

div.stButton > button {
    border-radius: 8px;
    font-weight: 600;
    transition: background 0.2s;
}
div.stButton > button[kind="primary"] { background: #6D5EF7; border: none; }
div.stButton > button[kind="primary"]:hover { background: #5a4dd6; }
</style>
"""


def apply_theme() -> None:
    st.markdown(_CSS, unsafe_allow_html=True)


def require_auth() -> dict:
    """Stop the page unless signed in; returns the stored user dict."""
    if not st.session_state.get("access_token"):
        st.warning("Please sign in first.")
        st.page_link("pages/0_Login.py", label="👉 Go to Login")
        st.stop()
    return st.session_state["user"]


def show_flash() -> None:
    """Render (once) a message queued by another page before it redirected."""
    flash = st.session_state.pop("flash", None)
    if flash:
        level, text = flash
        getattr(st, level)(text)


def redirect(page: str, message: str | None = None, level: str = "error") -> None:
    if message:
        st.session_state["flash"] = (level, message)
    st.switch_page(page)
