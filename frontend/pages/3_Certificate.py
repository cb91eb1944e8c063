"""3_Certificate.py — Preview and download the certificate of a passed result."""
import streamlit as st

from certifyme.services.certificate import certificate_filename
from components.api_client import (
    APIError,
    get_certificate_pdf,
    get_certificate_png,
    get_result,
)
from components.theme import apply_theme, redirect, require_auth

st.set_page_config(page_title="Certificate", page_icon="🏆", layout="wide")
apply_theme()
require_auth()

token = st.session_state["access_token"]
result_id = st.session_state.get("result_id")
if not result_id:
    redirect("Home.py")

try:
    result = get_result(result_id, token)
    if not result["passed"]:
        redirect("Home.py", "Certificate not available")
    with st.spinner("Loading certificate..."):
        png = get_certificate_png(result_id, token)
except APIError:
    redirect("Home.py", "Certificate not available")

quiz = result["quiz"]
st.image(png, use_container_width=True)

c1, c2, c3 = st.columns(3)
with c1:
    try:
        pdf = get_certificate_pdf(result_id, token)
    except APIError as e:
        st.error(f"Failed to generate certificate: {e}")
    else:
        st.download_button(
            "⬇️ Download PDF",
            data=pdf,
            file_name=certificate_filename(quiz["title"]),
            mime="application/pdf",
            type="primary",
            use_container_width=True,
        )
with c2:
    st.text_input(
        "Share",
        value=f"I just completed {quiz['title']} with a score of {result['score']}%!",
        label_visibility="collapsed",
    )
with c3:
    if st.button("Back to Dashboard", use_container_width=True):
        st.switch_page("Home.py")
