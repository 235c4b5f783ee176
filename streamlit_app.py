import streamlit as st
from thoughtvault.config import settings
from thoughtvault.ui.validation import run_all_checks, asset_dir_warning
from thoughtvault.ui.state import init_session

# Page configuration
st.set_page_config(
    page_title="ThoughtVault",
    page_icon="💭",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Run pre-flight checks
errors = run_all_checks(settings)

if errors:
    st.error("🚨 System Configuration Errors")
    for err in errors:
        st.write(f"- {err}")
    st.stop()

warning = asset_dir_warning(settings)
if warning:
    st.sidebar.warning(warning)

# Initialize State
init_session()

# Navigation
st.sidebar.title("ThoughtVault")

# Multipage definition
pg = st.navigation([
    st.Page("src/thoughtvault/ui/pages/1_summarize.py", title="Summarize", icon="💭"),
    st.Page("src/thoughtvault/ui/pages/2_library.py", title="Library", icon="📚"),
])

pg.run()
