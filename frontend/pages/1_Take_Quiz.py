"""
1_Take_Quiz.py — Answer one quiz, one question at a time.

The attempt lives in st.session_state["quiz_session"] as a certifyme
QuizSession backed by the API (HttpQuizStore). Nothing is persisted until
Submit; leaving the page simply abandons the attempt.
"""
import streamlit as st

from certifyme.errors import NotFoundError, PersistenceError, QuizError
from certifyme.services.quiz.session import QuizSession
from certifyme.services.quiz.types import Identity
from components.quiz_store import HttpQuizStore, submit_error_message
from components.theme import apply_theme, redirect, require_auth, show_flash

st.set_page_config(page_title="Take Quiz", page_icon="📝", layout="wide")
apply_theme()

user = require_auth()
quiz_id = st.session_state.get("active_quiz_id")
if not quiz_id:
    redirect("Home.py", "Pick a quiz to start.", "info")


# ── Load (or resume) the session ──────────────────────────────────────────────
def _store_access_token(token: str) -> None:
    st.session_state["access_token"] = token


def _load_session() -> QuizSession:
    identity = Identity(
        user_id=user["id"],
        display_name=user.get("display_name") or user["email"],
    )
    store = HttpQuizStore(
        st.session_state["access_token"],
        refresh_tok=st.session_state.get("refresh_token"),
        on_refresh=_store_access_token,
    )
    session = QuizSession(store, identity)
    try:
        with st.spinner("Loading quiz..."):
            session.load(quiz_id)
    except NotFoundError:
        redirect("Home.py", "Quiz not found")
    except PersistenceError:
        redirect("Home.py", "Failed to load quiz")
    return session


qs: QuizSession | None = st.session_state.get("quiz_session")
if qs is None or qs.quiz is None or qs.quiz.id != quiz_id:
    qs = _load_session()
    st.session_state["quiz_session"] = qs

show_flash()

quiz = qs.quiz
question = qs.current_question

# ── Header ────────────────────────────────────────────────────────────────────
st.title(quiz.title)
left, right = st.columns(2)
left.markdown(
    f"<span class='muted'>Question {qs.pointer + 1} of {qs.question_count}</span>",
    unsafe_allow_html=True,
)
right.markdown(
    f"<div class='muted' style='text-align:right'>Passing Score: {quiz.passing_score}%</div>",
    unsafe_allow_html=True,
)
st.progress(qs.progress)

# ── Current question ──────────────────────────────────────────────────────────
st.subheader(question.question_text)
for index, option in enumerate(question.options):
    selected = qs.current_answer == index
    if st.button(
        f"{chr(65 + index)}.  {option}",
        key=f"opt-{question.id}-{index}",
        type="primary" if selected else "secondary",
        use_container_width=True,
    ):
        qs.select_answer(index)
        st.rerun()

st.divider()

# ── Navigation ────────────────────────────────────────────────────────────────
nav_prev, nav_mid, nav_next = st.columns([1, 2, 1])

with nav_prev:
    if st.button("◀ Previous", disabled=qs.is_first, use_container_width=True):
        qs.retreat()
        st.rerun()

nav_mid.markdown(
    f"<div class='muted' style='text-align:center'>"
    f"Answered: {qs.answered_count}/{qs.question_count}</div>",
    unsafe_allow_html=True,
)

with nav_next:
    if qs.is_last:
        if st.button("Submit Quiz ➤", type="primary", use_container_width=True):
            try:
                with st.spinner("Submitting..."):
                    result_id = qs.submit()
            except QuizError as exc:
                st.error(submit_error_message(qs, exc))
            else:
                st.session_state.pop("quiz_session", None)
                st.session_state["result_id"] = result_id
                redirect("pages/2_Result.py", "Quiz submitted successfully!", "success")
    else:
        if st.button("Next ▶", use_container_width=True):
            qs.advance()
            st.rerun()
