import streamlit as st
import uuid
from typing import Optional
from thoughtvault.config import settings
from thoughtvault.models.record import ThoughtRecord
from thoughtvault.service import ThoughtService, build_service

def init_session():
    """Initialize session state variables."""
    if "service" not in st.session_state:
        st.session_state["service"] = build_service(settings)
    if "user_id" not in st.session_state:
        st.session_state["user_id"] = uuid.uuid4().hex
    if "current_record" not in st.session_state:
        st.session_state["current_record"] = None

def get_service() -> ThoughtService:
    """Get the service owned by this browser session."""
    return st.session_state["service"]

def get_user_id() -> str:
    return st.session_state["user_id"]

def get_current_record() -> Optional[ThoughtRecord]:
    """Get the most recently analyzed (not necessarily saved) record."""
    return st.session_state.get("current_record")

def set_current_record(record: Optional[ThoughtRecord]):
    st.session_state["current_record"] = record
