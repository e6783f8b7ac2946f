# Role: Streamlit chat UI.
# - Backend is authoritative: the transcript shown is the one returned by /transcript.
# - The input is disabled while the backend reports the session as pending (its "typing" state).

from __future__ import annotations

import os
import uuid
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

BACKEND_URL = os.getenv("PIXELSEEKER_BACKEND_URL", "http://127.0.0.1:8000")
BUSY_MESSAGE = "Still working on your previous message. Give me a moment."


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "session_id" not in st.session_state:
        st.session_state["session_id"] = str(uuid.uuid4())
    if "messages" not in st.session_state:
        st.session_state["messages"] = []


def sync_snapshot() -> bool:
    # Key line: the backend's pending flag is the source of truth for "busy"; returns it.
    snapshot = fetch_snapshot(st.session_state["session_id"])
    if snapshot is not None:
        st.session_state["messages"] = snapshot.get("messages") or []
    return is_pending(snapshot)


def is_pending(snapshot: Optional[Dict[str, Any]]) -> bool:
    # Unreachable backend counts as idle so the user can still type (and see the error).
    return bool((snapshot or {}).get("pending"))


# ----------------------------
# Backend calls
# ----------------------------
def send_to_backend(session_id: str, user_message: str) -> str:
    resp = requests.post(
        f"{BACKEND_URL}/chat",
        json={"session_id": session_id, "user_message": user_message},
        timeout=60,
    )
    resp.raise_for_status()
    return resp.json()["assistant_message"]


def fetch_snapshot(session_id: str) -> Optional[Dict[str, Any]]:
    try:
        r = requests.get(f"{BACKEND_URL}/transcript/{session_id}", timeout=10)
        if r.status_code != 200:
            return None
        return r.json()
    except requests.RequestException:
        return None


def reset_backend(session_id: str) -> Optional[List[Dict[str, Any]]]:
    try:
        r = requests.post(f"{BACKEND_URL}/sessions/{session_id}/reset", timeout=10)
        if r.status_code != 200:
            return None
        return r.json().get("messages") or []
    except requests.RequestException:
        return None


def is_busy_error(exc: requests.RequestException) -> bool:
    response = getattr(exc, "response", None)
    return isinstance(exc, requests.HTTPError) and response is not None and response.status_code == 409


def send_error_text(exc: requests.RequestException) -> str:
    # 409 means the session still has a turn in flight; other HTTP errors mean the backend answered.
    if is_busy_error(exc):
        return BUSY_MESSAGE
    if isinstance(exc, requests.HTTPError):
        return "The backend couldn't handle that message. Please try again."
    return f"I couldn't reach the backend. Make sure the API is running on {BACKEND_URL}."


# ----------------------------
# Rendering
# ----------------------------
def _role(msg: Dict[str, Any]) -> str:
    return "assistant" if msg.get("direction") == "incoming" else "user"


def render_sidebar(busy: bool) -> None:
    st.sidebar.title("PixelSeeker")
    st.sidebar.caption('Start a message with "recommend" to search the game catalog.')

    if st.sidebar.button("New chat", use_container_width=True, disabled=busy):
        st.session_state["messages"] = reset_backend(st.session_state["session_id"]) or []
        st.rerun()

    if busy and st.sidebar.button("Refresh", use_container_width=True):
        st.rerun()


def render_chat(busy: bool) -> None:
    for msg in st.session_state["messages"]:
        with st.chat_message(_role(msg)):
            st.markdown(msg.get("text", ""))

    if busy:
        with st.chat_message("assistant"):
            st.caption("PixelSeeker is typing...")


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="PixelSeeker", page_icon="🎮")

    st.title("🎮 PixelSeeker")
    st.caption("Ask about games, or try: recommend rpg")

    ensure_session()
    busy = sync_snapshot()
    render_sidebar(busy)
    render_chat(busy)

    user_input = st.chat_input("What game genre are you looking for?", disabled=busy)
    if not user_input:
        return

    # Echo user message immediately
    with st.chat_message("user"):
        st.markdown(user_input)

    try:
        with st.spinner("PixelSeeker is typing..."):
            assistant_text = send_to_backend(st.session_state["session_id"], user_input)

        with st.chat_message("assistant"):
            st.markdown(assistant_text)

        # Key line: re-sync with the authoritative transcript after each turn.
        sync_snapshot()

    except requests.RequestException as e:
        with st.chat_message("assistant"):
            if is_busy_error(e):
                st.info(send_error_text(e))
            else:
                st.error(send_error_text(e))


if __name__ == "__main__":
    main()
