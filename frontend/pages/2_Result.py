"""2_Result.py — Score of a submitted attempt."""
from datetime import datetime

import streamlit as st

from components.api_client import APIError, get_result
from components.theme import apply_theme, redirect, require_auth, show_flash

st.set_page_config(page_title="Result", page_icon="🏁", layout="centered")
apply_theme()
require_auth()

result_id = st.session_state.get("result_id")
if not result_id:
    redirect("Home.py")

try:
    result = get_result(result_id, st.session_state["access_token"])
except APIError as e:
    redirect("Home.py", f"Result not found: {e}" if e.status_code != 404 else "Result not found")

show_flash()
quiz = result["quiz"]
passed = result["passed"]

if passed and st.session_state.get("celebrated") != result_id:
    st.session_state["celebrated"] = result_id
    st.balloons()

# ── Header ────────────────────────────────────────────────────────────────────
st.markdown(
    f"<h1 style='text-align:center'>{'✅ Congratulations!' if passed else '❌ Try Again!'}</h1>"
    f"<div style='text-align:center'><span class='badge {'badge-pass' if passed else 'badge-fail'}' "
    f"style='font-size:1rem'>{'PASSED' if passed else 'FAILED'}</span></div>",
    unsafe_allow_html=True,
)
st.divider()

# ── Score details ─────────────────────────────────────────────────────────────
st.subheader(quiz["title"])
c1, c2 = st.columns(2)
c1.metric("Your Score", f"{result['score']}%")
c2.metric("Passing Score", f"{quiz['passing_score']}%")

st.markdown(
    f"Correct Answers: **{result['correct_count']} / {result['total_questions']}**"
)
st.progress(result["score"] / 100)

completed = datetime.fromisoformat(result["created_at"])
st.markdown(
    f"<div class='muted' style='text-align:center'>Completed on {completed:%Y-%m-%d}</div>",
    unsafe_allow_html=True,
)
st.divider()

# ── Actions ───────────────────────────────────────────────────────────────────
a1, a2, a3 = st.columns(3)
if a1.button("🔁 Retake Quiz", use_container_width=True):
    st.session_state["active_quiz_id"] = quiz["id"]
    st.session_state.pop("quiz_session", None)
    st.switch_page("pages/1_Take_Quiz.py")
if passed and a2.button("🏆 Get Certificate", type="primary", use_container_width=True):
    st.switch_page("pages/3_Certificate.py")
if a3.button("Back to Dashboard", use_container_width=True):
    st.switch_page("Home.py")

if not passed:
    st.info(
        "Don't worry! You can retake the quiz to improve your score and earn "
        "your certificate. Review the material and try again when you're ready."
    )
