"""
Home.py — Entry point of the CertifyMe Streamlit app.
Checks for a valid JWT; redirects to login if missing.
Shows the quiz dashboard when authenticated.
"""
import streamlit as st

from components.api_client import APIError, get_dashboard, load_sample_quizzes
from components.theme import apply_theme, require_auth, show_flash

st.set_page_config(
    page_title="CertifyMe",
    page_icon="🎓",
    layout="wide",
)
apply_theme()

user = require_auth()
token = st.session_state["access_token"]
display_name = user.get("display_name") or user["email"]

# ── Sidebar ────────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown(
        f"<div class='muted'>Signed in as</div>"
        f"<div style='font-weight:600'>{display_name}</div>"
        f"<div class='muted' style='font-size:0.75rem'>{user['email']}</div>",
        unsafe_allow_html=True,
    )
    st.divider()
    if st.button("Sign Out", key="sidebar-logout"):
        for k in ["access_token", "refresh_token", "user", "quiz_session",
                  "active_quiz_id", "result_id"]:
            st.session_state.pop(k, None)
        st.rerun()

show_flash()

# ── Load dashboard ────────────────────────────────────────────────────────────
try:
    with st.spinner("Loading dashboard..."):
        data = get_dashboard(token)
except APIError as e:
    st.error(f"Failed to load dashboard: {e}")
    st.stop()

stats = data["stats"]
quizzes = data["quizzes"]

st.markdown(f"## 👋 Welcome back, **{display_name}**")
st.markdown("<p class='muted'>Master skills, earn certificates.</p>", unsafe_allow_html=True)

# ── Stats overview ────────────────────────────────────────────────────────────
col1, col2, col3 = st.columns(3)
col1.metric("📘 Quizzes Completed", stats["completed"])
col2.metric("🏆 Certificates Earned", stats["passed"])
col3.metric("⏱️ Average Score", f"{stats['avg_score']}%")
st.divider()

# ── Available quizzes ─────────────────────────────────────────────────────────
st.markdown("### Available Quizzes")

if not quizzes:
    st.markdown(
        """
        <div class="dash-card">
          <h3>🗄️ No Quizzes Available</h3>
          <p>It looks like there are no quizzes in the database yet.
             Load some sample quizzes to get started!</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    if st.button("Load Sample Quizzes", type="primary"):
        try:
            with st.spinner("Loading sample data..."):
                load_sample_quizzes(token)
            st.session_state["flash"] = ("success", "Sample quizzes loaded successfully!")
            st.rerun()
        except APIError as e:
            st.error(f"Failed to load sample data: {e}")
    st.stop()

columns = st.columns(3)
for i, quiz in enumerate(quizzes):
    last = quiz["latest_result"]
    with columns[i % 3]:
        badge = ""
        if last:
            cls, label = ("badge-pass", "Passed") if last["passed"] else ("badge-fail", "Failed")
            badge = f"<span class='badge {cls}'>{label}</span>"
        your_score = f"<p>Your Score: <b>{last['score']}%</b></p>" if last else ""
        st.markdown(
            f"""
            <div class="dash-card">
              <h3>{quiz['title']}{badge}</h3>
              <p>{quiz['description']}</p>
              <p style="margin-top:0.6rem">Passing Score: {quiz['passing_score']}%</p>
              {your_score}
            </div>
            """,
            unsafe_allow_html=True,
        )
        label = "▶️ Retake Quiz" if last else "▶️ Start Quiz"
        if st.button(label, key=f"start-{quiz['id']}", type="primary"):
            st.session_state["active_quiz_id"] = quiz["id"]
            st.session_state.pop("quiz_session", None)
            st.switch_page("pages/1_Take_Quiz.py")
        if last and last["passed"]:
            if st.button("🏆 Certificate", key=f"cert-{quiz['id']}"):
                st.session_state["result_id"] = last["id"]
                st.switch_page("pages/3_Certificate.py")
