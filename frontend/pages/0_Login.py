"""
0_Login.py — Sign in & Create account page.
This is page 0 in the Streamlit sidebar so it always appears first.
"""
import streamlit as st
from components.api_client import login, register, APIError
from components.theme import apply_theme

# ── Page config ───────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="CertifyMe — Sign In",
    page_icon="🎓",
    layout="centered",
)
apply_theme()

st.markdown(
    """
    <style>
    .auth-title {
        font-size: 1.8rem;
        font-weight: 700;
        text-align: center;
        margin: 2rem 0 0.25rem 0;
    }
    .auth-sub {
        font-size: 0.9rem;
        color: #A7B0C0;
        text-align: center;
        margin-bottom: 1.8rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def _store_session(data: dict) -> None:
    st.session_state["access_token"] = data["access_token"]
    st.session_state["refresh_token"] = data["refresh_token"]
    st.session_state["user"] = data["user"]


# ── Redirect if already logged in ────────────────────────────────────────────
if st.session_state.get("access_token"):
    st.success("You are already signed in.")
    st.page_link("Home.py", label="Go to Dashboard →")
    st.stop()

st.markdown(
    '<div class="auth-title">🎓 CertifyMe</div>'
    '<div class="auth-sub">Master skills, earn certificates</div>',
    unsafe_allow_html=True,
)

tab_login, tab_register = st.tabs(["Sign In", "Sign Up"])

# ── SIGN IN ───────────────────────────────────────────────────────────────────
with tab_login:
    with st.form("login_form"):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In", type="primary")

    if submitted:
        if not email or not password:
            st.error("Please fill in both fields.")
        else:
            try:
                data = login(email.strip().lower(), password)
                _store_session(data)
                st.session_state["flash"] = ("success", "Welcome back!")
                st.switch_page("Home.py")
            except APIError as e:
                st.error(str(e) or "Failed to sign in")

# ── SIGN UP ───────────────────────────────────────────────────────────────────
with tab_register:
    with st.form("register_form"):
        r_name = st.text_input("Full name", placeholder="Ada Lovelace", key="r_name")
        r_email = st.text_input("Email", placeholder="you@example.com", key="r_email")
        r_password = st.text_input("Password (min 8 chars)", type="password", key="r_pass")
        r_confirm = st.text_input("Confirm Password", type="password", key="r_confirm")
        r_submitted = st.form_submit_button("Create Account", type="primary")

    if r_submitted:
        if not r_email or not r_password:
            st.error("Email and password are required.")
        elif r_password != r_confirm:
            st.error("Passwords do not match.")
        elif len(r_password) < 8:
            st.error("Password must be at least 8 characters.")
        else:
            try:
                data = register(
                    r_email.strip().lower(),
                    r_password,
                    r_name.strip() or None,
                )
                _store_session(data)
                st.session_state["flash"] = ("success", "Account created!")
                st.switch_page("Home.py")
            except APIError as e:
                st.error(str(e) or "Failed to create account")
