import streamlit as st
from thoughtvault.logging import logger, new_trace_id
from thoughtvault.usage import UsageLimitReached
from thoughtvault.ui.state import get_service, get_user_id, get_current_record, set_current_record

st.title("Summarize a Conversation")

service = get_service()
user_id = get_user_id()

if service.usage:
    status = service.usage.status(user_id)
    st.sidebar.caption(f"Summaries used: {status.count} / {status.limit}")

st.sidebar.info(f"Saving to {service.store.describe()}")

# --- Input ---
with st.form("summarize_form"):
    transcript = st.text_area(
        "Chat transcript",
        height=300,
        placeholder="Paste a conversation with an AI assistant here...",
    )
    submitted = st.form_submit_button("Analyze")

if submitted:
    new_trace_id()
    with st.spinner("Analyzing..."):
        try:
            record = service.analyze(transcript, user_id=user_id)
            set_current_record(record)
        except UsageLimitReached as e:
            st.error(f"🚫 {e}")
        except ValueError as e:
            st.warning(str(e))
        except Exception as e:
            logger.error(f"Analysis failed: {e}")
            st.error(f"Analysis failed: {e}")

st.divider()

# --- Result ---
record = get_current_record()
if record is None:
    st.info("No thought asset yet. Paste a transcript above and press Analyze.")
    st.stop()

markdown = service.export_markdown(record)
st.markdown(markdown)

c1, c2 = st.columns(2)
if c1.button("💾 Save", key=f"save_{record.id}"):
    store = service.save(record)
    if store is not None:
        st.toast(f"✅ Saved to {store.describe()}", icon="✅")
    else:
        st.error("Could not save this thought asset.")

c2.download_button(
    "⬇️ Download Markdown",
    data=markdown,
    file_name=service.export_filename(record),
    mime="text/markdown",
)
