import streamlit as st
from thoughtvault.ui.state import get_service

st.title("Thought Library")

service = get_service()
records = service.list_records()

if not records:
    st.info("No saved thought assets.")
    st.stop()

sources = ", ".join(store.describe() for store in service.stores())
st.write(f"{len(records)} thought assets in {sources}")

for record in records:
    first_line = record.subject.splitlines()[0] if record.subject else "Untitled"
    with st.expander(f"{record.created_at:%Y-%m-%d %H:%M} · {first_line}"):
        markdown = service.export_markdown(record)
        st.markdown(markdown)

        c1, c2 = st.columns(2)
        c1.download_button(
            "⬇️ Download",
            data=markdown,
            file_name=service.export_filename(record),
            mime="text/markdown",
            key=f"dl_{record.id}",
        )
        if c2.button("🗑️ Delete", key=f"del_{record.id}"):
            if service.delete(record.id):
                st.toast("Deleted", icon="🗑️")
                st.rerun()
            else:
                st.error("Could not delete this thought asset.")
