"""
UI layer
Purpose: Streamlit-only glue. Renders widgets, collects user inputs, and delegates
all work to the controller. Keeps UI concerns (layout/state widgets) separate from
session logic so logic can be unit tested without Streamlit.
"""

import streamlit as st

from interview_practice.config import (
    build_llm_client,
    configure_logging,
    load_config,
)
from interview_practice.controller import InterviewSessionController
from interview_practice.exceptions import StateError, UpstreamError, ValidationError
from interview_practice.models import SessionParameters


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Interview Practice",
    page_icon="🎯",
    layout="centered",
)
config = load_config()
configure_logging(config.log_level)

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("api_key_used", None)
st_session.setdefault("role", "Software Engineer")
st_session.setdefault("company", "Acme Corp")
st_session.setdefault("program", "New Grad")
st_session.setdefault("answer", "")
st_session.setdefault("flash", None)


# ---------------------------
# Helpers
# ---------------------------
def get_controller():
    """Return the controller object (None until an API key is set)."""
    return st_session.get("controller")


def get_ready_controller():
    """Return controller only if it's initialized and ready."""
    controller = get_controller()
    return controller if controller and controller.is_ready() else None


def session_params() -> SessionParameters:
    return SessionParameters(
        role=st_session.role,
        company=st_session.company,
        program=st_session.program,
    )


def on_fetch_questions():
    try:
        with st.spinner("Generating questions…"):
            get_controller().start_session(session_params())
        st_session.answer = ""
    except ValidationError as e:
        st_session.flash = ("warning", str(e))
    except UpstreamError as e:
        st_session.flash = ("error", f"Could not generate questions: {e}. Please try again.")


def on_submit_answer():
    try:
        with st.spinner("Grading your answer…"):
            get_controller().submit_answer(st_session.answer)
        st_session.answer = ""
    except (ValidationError, StateError) as e:
        st_session.flash = ("warning", str(e))
    except UpstreamError as e:
        st_session.flash = ("error", f"Could not grade your answer: {e}. Please try again.")


def on_reset():
    """Clear questions and history; keep the API key and inputs."""
    get_controller().reset()
    st_session.answer = ""


def render_flash():
    if not st_session.flash:
        return
    kind, msg = st_session.flash
    st_session.flash = None
    if kind == "error":
        st.error(msg)
    else:
        st.warning(msg)


# ---------------------------
# SIDEBAR: API key
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")
    st.markdown("## OPEN AI API Key Required")
    user_api_key = st.text_input(
        "Enter your API key",
        value=config.openai_api_key,
        type="password",
        help="We do not store your key. It stays in your session only.",
    )
    if not user_api_key:
        st.warning("Please enter your API key in the sidebar to continue.")
        st.stop()
    if st_session.api_key_used != user_api_key:
        prior_controller = get_controller()
        try:
            llm = build_llm_client(config, api_key=user_api_key)
        except UpstreamError as e:
            st.error(f"OpenAI client init failed: {e}")
            st.stop()
        st_session.controller = InterviewSessionController(
            llm,
            settings=config.llm_settings(),
            question_count=config.question_count,
        )
        st_session.api_key_used = user_api_key
        if prior_controller and (
            prior_controller.has_questions or prior_controller.history
        ):
            st_session.flash = (
                "warning",
                "API key changed: the session was reset. Fetch questions again.",
            )

    controller = get_ready_controller()
    if controller is None:
        st.error("OpenAI client is not ready. Re-enter your API key.")
        st.stop()
    st.caption(
        f"Tokens in/out: {controller.tokens_in} / {controller.tokens_out}"
        + (f" · {controller.model_used}" if controller.model_used else "")
    )

# ---------------------------
# Header + inputs
# ---------------------------
st.title("Interview Practice — AI")

c1, c2, c3 = st.columns(3)
c1.text_input("Role", key="role", placeholder="Role (e.g. Product Manager)")
c2.text_input("Company", key="company", placeholder="Company (optional)")
c3.text_input("Program", key="program", placeholder="Program (optional)")

b1, b2, _ = st.columns([1, 1, 3])
b1.button("Fetch Questions", type="primary", on_click=on_fetch_questions)
b2.button("Reset", on_click=on_reset)

render_flash()

# ---------------------------
# Practice
# ---------------------------
if not controller.has_questions:
    st.info(
        'No questions yet. Click "Fetch Questions" to generate a set tailored '
        "to your role."
    )
    st.stop()

st.caption(f"Question {controller.current_index + 1} / {len(controller.questions)}")
st.markdown(f"> {controller.current_question()}")

st.text_area(
    "Your answer",
    key="answer",
    height=180,
    placeholder="Type your answer here...",
)

a1, a2, a3, _ = st.columns([2, 1, 1, 2])
a1.button("Submit & Grade", type="primary", on_click=on_submit_answer)
a2.button("Prev", on_click=controller.previous)
a3.button("Next", on_click=controller.next)

# ---------------------------
# History
# ---------------------------
st.subheader("Session history")
if not controller.history:
    st.caption("No answered questions yet.")
for entry in controller.history:
    with st.container(border=True):
        st.markdown(f"Score: **{entry.score}**")
        st.markdown(f"**Q:** {entry.question}")
        st.markdown(f"**A:** {entry.answer}")
        st.markdown(f"**Feedback:** {entry.feedback}")
